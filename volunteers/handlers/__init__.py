from volunteers.handlers.views import (
    EventVolunteerListView,
    VolunteerAssignmentView,
    VolunteerAttendanceView,
    VolunteerDetailView,
    VolunteerListView,
    VolunteerTaskView,
)

__all__ = [
    "EventVolunteerListView",
    "VolunteerAssignmentView",
    "VolunteerAttendanceView",
    "VolunteerDetailView",
    "VolunteerListView",
    "VolunteerTaskView",
]
