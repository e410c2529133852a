from django.urls import path

from events.handlers import (
    CertificateView,
    DocumentUploadView,
    EventDetailView,
    EventFinancialsView,
    EventListView,
    FinanceReportView,
    RegistrationListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/financials",
        EventFinancialsView.as_view(),
        name="event-financials",
    ),
    path(
        "events/<str:event_id>/registrations",
        RegistrationListView.as_view(),
        name="registration-list",
    ),
    path(
        "events/<str:event_id>/certificate",
        CertificateView.as_view(),
        name="event-certificate",
    ),
    path("documents", DocumentUploadView.as_view(), name="document-upload"),
    path("finance/report", FinanceReportView.as_view(), name="finance-report"),
]
