from hostel.services.hostel_service import HostelService
from hostel.stores.django_store import DjangoHostelStore


def get_hostel_service() -> HostelService:
    return HostelService(DjangoHostelStore())
