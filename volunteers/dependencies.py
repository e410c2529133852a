from events.stores.django_store import DjangoEventStore
from volunteers.services.volunteer_service import VolunteerService
from volunteers.stores.django_store import DjangoVolunteerStore


def get_volunteer_service() -> VolunteerService:
    return VolunteerService(DjangoVolunteerStore(), DjangoEventStore())
