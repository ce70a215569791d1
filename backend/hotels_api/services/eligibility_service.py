"""
Hotel eligibility decision.

DECISION ORDER
==============

The checks run strictly in this order and the first failure wins. The order
is part of the API contract, since it decides which status a client sees:

  1. No enrollment for the user              -> Unauthorized   (401)
  2. No ticket, or a ticket whose type is
     remote or does not include a hotel      -> NotFound       (404)
  3. Ticket still RESERVED                   -> InvalidData    (402)
  4. Otherwise                               -> Eligibility

Step 2 deliberately collapses "no ticket" and "wrong ticket type" into one
outcome.
"""

from dataclasses import dataclass

from hotels_api.core.logging import get_logger
from hotels_api.core.metrics import record_eligibility
from hotels_api.domain.errors import InvalidData, NotFound, Unauthorized
from hotels_api.models import Enrollment, Ticket, TicketStatus
from hotels_api.stores.interfaces import HotelStore

logger = get_logger(__name__)

TICKET_NOT_PAID = "Ticket must be paid"


@dataclass(frozen=True)
class Eligibility:
    """Resolved context for an eligible user."""

    enrollment: Enrollment
    ticket: Ticket


class EligibilityChecker:
    """Decides whether a user may view hotel catalog data."""

    def __init__(self, store: HotelStore) -> None:
        self._store = store

    async def evaluate(self, user_id: int) -> Eligibility:
        """
        Classify the user's enrollment and ticket.

        Raises:
            Unauthorized: the user has no enrollment.
            NotFound: no ticket, or the ticket type carries no hotel benefit.
            InvalidData: the ticket has not been paid.
        """
        enrollment = await self._store.find_enrollment_by_user(user_id)
        if enrollment is None:
            self._deny(user_id, "unauthorized", reason="no_enrollment")
            raise Unauthorized()

        ticket = await self._store.find_ticket_by_enrollment(enrollment.id)
        if ticket is None:
            self._deny(user_id, "not_found", reason="no_ticket")
            raise NotFound()

        ticket_type = ticket.ticket_type
        if not ticket_type.includes_hotel or ticket_type.is_remote:
            self._deny(
                user_id,
                "not_found",
                reason="ticket_type_without_hotel",
                ticket_id=ticket.id,
                includes_hotel=ticket_type.includes_hotel,
                is_remote=ticket_type.is_remote,
            )
            raise NotFound()

        if ticket.status == TicketStatus.RESERVED.value:
            self._deny(user_id, "payment_required", reason="ticket_reserved", ticket_id=ticket.id)
            raise InvalidData([TICKET_NOT_PAID])

        record_eligibility("eligible")
        logger.info("eligibility_granted", user_id=user_id, ticket_id=ticket.id)
        return Eligibility(enrollment=enrollment, ticket=ticket)

    @staticmethod
    def _deny(user_id: int, outcome: str, **context) -> None:
        record_eligibility(outcome)
        logger.info("eligibility_denied", user_id=user_id, outcome=outcome, **context)
