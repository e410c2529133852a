"""Service construction for the HTTP layer. Handlers get their services here."""

from events.services.certificate_service import CertificateService
from events.services.document_service import DocumentService
from events.services.event_service import EventService
from events.services.finance_service import FinanceService
from events.services.registration_service import RegistrationService
from events.stores.django_store import DjangoEventStore, DjangoRegistrationStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def get_registration_service() -> RegistrationService:
    return RegistrationService(DjangoEventStore(), DjangoRegistrationStore())


def get_finance_service() -> FinanceService:
    return FinanceService(DjangoEventStore())


def get_certificate_service() -> CertificateService:
    return CertificateService(DjangoEventStore(), DjangoRegistrationStore())


def get_document_service() -> DocumentService:
    return DocumentService()
