from volunteers.domain.models import Volunteer, VolunteerId

__all__ = ["Volunteer", "VolunteerId"]
