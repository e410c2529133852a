"""Finance reporting over event cost and sponsorship figures."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from events.domain.models import Event
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FinancialEventDetail:
    event_id: str
    event_name: str
    estimated_cost: Decimal
    sponsorship_amount: Decimal
    net: Decimal


@dataclass(frozen=True)
class FinancialSummary:
    total_estimated_cost: Decimal
    total_sponsorship_received: Decimal
    net_position: Decimal
    events: tuple[FinancialEventDetail, ...]


class FinanceService:
    def __init__(self, store: EventStore) -> None:
        self._store = store

    def generate_report(self, events: Iterable[Event] | None = None) -> FinancialSummary:
        """Summarize cost against sponsorship, per event and in total.

        Missing amounts count as zero. Defaults to every stored event.
        """
        if events is None:
            events = self._store.list_events()

        details = []
        for event in events:
            cost = event.estimated_cost.amount if event.estimated_cost else Decimal("0")
            sponsorship = event.sponsorship_amount.amount if event.sponsorship_amount else Decimal("0")
            details.append(
                FinancialEventDetail(
                    event_id=str(event.id),
                    event_name=event.name,
                    estimated_cost=cost,
                    sponsorship_amount=sponsorship,
                    net=sponsorship - cost,
                )
            )

        total_cost = sum((d.estimated_cost for d in details), Decimal("0"))
        total_sponsorship = sum((d.sponsorship_amount for d in details), Decimal("0"))
        summary = FinancialSummary(
            total_estimated_cost=total_cost,
            total_sponsorship_received=total_sponsorship,
            net_position=total_sponsorship - total_cost,
            events=tuple(details),
        )
        logger.info(
            "Generated finance report over %d events, net position %s",
            len(details),
            summary.net_position,
        )
        return summary
