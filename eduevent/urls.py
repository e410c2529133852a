from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("events.urls")),
    path("api/", include("volunteers.urls")),
    path("api/hostel/", include("hostel.urls")),
    path("api/canteen/", include("canteen.urls")),
]
