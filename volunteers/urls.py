from django.urls import path

from volunteers.handlers import (
    EventVolunteerListView,
    VolunteerAssignmentView,
    VolunteerAttendanceView,
    VolunteerDetailView,
    VolunteerListView,
    VolunteerTaskView,
)

urlpatterns = [
    path("volunteers", VolunteerListView.as_view(), name="volunteer-list"),
    path("volunteers/<str:volunteer_id>", VolunteerDetailView.as_view(), name="volunteer-detail"),
    path(
        "volunteers/<str:volunteer_id>/events/<str:event_id>",
        VolunteerAssignmentView.as_view(),
        name="volunteer-assignment",
    ),
    path(
        "volunteers/<str:volunteer_id>/events/<str:event_id>/attendance",
        VolunteerAttendanceView.as_view(),
        name="volunteer-attendance",
    ),
    path(
        "volunteers/<str:volunteer_id>/events/<str:event_id>/task",
        VolunteerTaskView.as_view(),
        name="volunteer-task",
    ),
    path(
        "events/<str:event_id>/volunteers",
        EventVolunteerListView.as_view(),
        name="event-volunteer-list",
    ),
]
