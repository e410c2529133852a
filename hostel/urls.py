from django.urls import path

from hostel.handlers import (
    ComplaintDetailView,
    ComplaintListView,
    RoomDetailView,
    RoomListView,
    RoomRequestDetailView,
    RoomRequestListView,
)

urlpatterns = [
    path("rooms", RoomListView.as_view(), name="hostel-room-list"),
    path("rooms/<str:room_id>", RoomDetailView.as_view(), name="hostel-room-detail"),
    path("requests", RoomRequestListView.as_view(), name="hostel-request-list"),
    path("requests/<str:request_id>", RoomRequestDetailView.as_view(), name="hostel-request-detail"),
    path("complaints", ComplaintListView.as_view(), name="hostel-complaint-list"),
    path(
        "complaints/<str:complaint_id>",
        ComplaintDetailView.as_view(),
        name="hostel-complaint-detail",
    ),
]
