from events.handlers.views import (
    CertificateView,
    DocumentUploadView,
    EventDetailView,
    EventFinancialsView,
    EventListView,
    FinanceReportView,
    RegistrationListView,
)

__all__ = [
    "CertificateView",
    "DocumentUploadView",
    "EventDetailView",
    "EventFinancialsView",
    "EventListView",
    "FinanceReportView",
    "RegistrationListView",
]
