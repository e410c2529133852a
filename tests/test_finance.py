"""Tests for the finance report.

Run with: pytest tests/test_finance.py -v
"""

from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from events.services.finance_service import FinanceService


class TestFinanceService:
    """Tests for FinanceService.generate_report."""

    def test_report_totals(self, event_store, make_event):
        make_event(name="Hackathon", estimated_cost=Decimal("1000"), sponsorship_amount=Decimal("1500"))
        make_event(name="Seminar", estimated_cost=Decimal("300"), sponsorship_amount=Decimal("0"))

        summary = FinanceService(event_store).generate_report()

        assert summary.total_estimated_cost == Decimal("1300")
        assert summary.total_sponsorship_received == Decimal("1500")
        assert summary.net_position == Decimal("200")
        nets = {d.event_name: d.net for d in summary.events}
        assert nets == {"Hackathon": Decimal("500"), "Seminar": Decimal("-300")}

    def test_missing_amounts_count_as_zero(self, event_store, make_event):
        event = make_event()

        summary = FinanceService(event_store).generate_report()

        (detail,) = summary.events
        assert detail.event_id == str(event.id)
        assert detail.estimated_cost == Decimal("0")
        assert detail.sponsorship_amount == Decimal("0")
        assert summary.net_position == Decimal("0")

    def test_empty_report(self, event_store):
        summary = FinanceService(event_store).generate_report()
        assert summary.events == ()
        assert summary.net_position == Decimal("0")

    def test_explicit_event_subset(self, event_store, make_event):
        included = make_event(estimated_cost=Decimal("50"))
        make_event(estimated_cost=Decimal("999"))

        summary = FinanceService(event_store).generate_report([included])

        assert summary.total_estimated_cost == Decimal("50")


@pytest.mark.django_db
class TestFinanceReportEndpoint:
    """Tests for GET /api/finance/report"""

    def test_report(self, api_client: APIClient, make_db_event):
        make_db_event(estimated_cost=Decimal("400"), sponsorship_amount=Decimal("100"))

        response = api_client.get("/api/finance/report")

        assert response.status_code == 200
        assert response.data["total_estimated_cost"] == "400.00"
        assert response.data["total_sponsorship_received"] == "100.00"
        assert response.data["net_position"] == "-300.00"
        assert len(response.data["events"]) == 1
