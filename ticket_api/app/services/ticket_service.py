"""
Ticket calculation.

A ticket expires three days after the day it was issued (UTC, time of
day zeroed).  Passengers aged 60 and over pay the senior fare.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from ..schemas.user import Ticket

TICKET_VALIDITY = timedelta(days=3)
SENIOR_AGE = 60
SENIOR_PRICE = 40.0
STANDARD_PRICE = 70.0


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def calculate_ticket(age: int, today: Optional[date] = None) -> Ticket:
    """Return the ticket for a passenger of ``age`` issued on ``today``.

    ``today`` defaults to the current UTC date.
    """
    issued_on = today or utc_today()
    midnight = datetime.combine(issued_on, time.min, tzinfo=timezone.utc)
    price = SENIOR_PRICE if age >= SENIOR_AGE else STANDARD_PRICE
    return Ticket(expires_at=midnight + TICKET_VALIDITY, price=price)
