from canteen.services.canteen_service import CanteenService
from canteen.stores.django_store import DjangoCanteenStore


def get_canteen_service() -> CanteenService:
    return CanteenService(DjangoCanteenStore())
