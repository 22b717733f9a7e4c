import logging
from datetime import date
from typing import Iterable, Optional

from errors import SlotConflictError
from models import Reservation

logger = logging.getLogger(__name__)


def find_occupant(reservations: Iterable[Reservation], slot_date: date, slot_time: str) -> Optional[Reservation]:
    for reservation in reservations:
        if reservation.date == slot_date and reservation.time == slot_time:
            return reservation
    return None


def ensure_slot_available(
    reservations: Iterable[Reservation],
    slot_date: date,
    slot_time: str,
    moving_id: Optional[str] = None,
) -> None:
    """
    Raise SlotConflictError unless (slot_date, slot_time) is free.

    When moving_id is given, the reservation with that id does not count as an
    occupant, so an edit that stays in its own slot is always admissible.
    Date-only, time-only and full reschedules all go through this check.
    """
    occupant = find_occupant(reservations, slot_date, slot_time)
    if occupant is not None and occupant.id != moving_id:
        logger.warning("Slot %s %s already held by reservation %s", slot_date, slot_time, occupant.id)
        raise SlotConflictError(slot_date, slot_time)
