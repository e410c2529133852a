from hostel.domain.models import Complaint, HostelRoom, RequestStatus, RequestType, RoomRequest

__all__ = ["Complaint", "HostelRoom", "RequestStatus", "RequestType", "RoomRequest"]
