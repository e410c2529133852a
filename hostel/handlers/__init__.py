from hostel.handlers.views import (
    ComplaintDetailView,
    ComplaintListView,
    RoomDetailView,
    RoomListView,
    RoomRequestDetailView,
    RoomRequestListView,
)

__all__ = [
    "ComplaintDetailView",
    "ComplaintListView",
    "RoomDetailView",
    "RoomListView",
    "RoomRequestDetailView",
    "RoomRequestListView",
]
