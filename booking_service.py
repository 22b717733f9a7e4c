import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from auth import Actor, AuthorizationGate
from errors import PermissionDeniedError
from models import OCCUPIED, Reservation, ReservationDraft, StaffSession
from store import ReservationStore
from validation import validate_draft, validate_slot
from week_grid import WeekDay, time_labels, week_days, week_slots

logger = logging.getLogger(__name__)

AVAILABLE = "available"
CLOSED = "closed"


@dataclass
class SlotView:
    date: date
    time: str
    status: str
    reservation: Optional[Reservation] = None


@dataclass
class WeekGrid:
    days: List[WeekDay]
    times: List[str]
    slots: List[SlotView]


class BookingService:
    def __init__(self, gate: AuthorizationGate, store: ReservationStore, today: Callable[[], date] = date.today):
        self.gate = gate
        self.store = store
        self.today = today

    def week_grid(self) -> WeekGrid:
        today = self.today()
        slots = []
        for slot in week_slots(today):
            reservation = self.store.lookup(slot.date, slot.time)
            if reservation is None:
                status = AVAILABLE
            elif reservation.is_administrative_block:
                status = CLOSED
            else:
                status = OCCUPIED
            slots.append(SlotView(slot.date, slot.time, status, reservation))
        return WeekGrid(week_days(today), time_labels(), slots)

    async def book(self, draft: ReservationDraft) -> Reservation:
        actor = self.gate.classify()
        if actor is Actor.ANONYMOUS:
            if draft.is_administrative_block:
                logger.warning("Anonymous administrative block rejected")
                raise PermissionDeniedError("Only staff may place administrative blocks.")
            validate_slot(draft.date, draft.time, [day.date for day in week_days(self.today())])
        else:
            validate_slot(draft.date, draft.time)
        clean = validate_draft(draft, self.gate.current_session)
        reservation = Reservation(**clean.model_dump())
        return await self.store.create(reservation)

    async def edit(self, reservation_id: str, draft: ReservationDraft) -> Reservation:
        staff = self.gate.require_staff("edit")
        current = self.store.get(reservation_id)
        validate_slot(draft.date, draft.time)
        clean = validate_draft(draft, staff)
        reservation = Reservation(id=current.id, **clean.model_dump())
        return await self.store.update(reservation)

    async def cancel(self, reservation_id: str) -> Reservation:
        self.gate.require_staff("delete")
        return await self.store.delete(reservation_id)

    def get_reservation(self, reservation_id: str) -> Reservation:
        self.gate.require_staff("view")
        return self.store.get(reservation_id)

    def list_reservations(self) -> List[Reservation]:
        self.gate.require_staff("view")
        return sorted(self.store.list(), key=lambda r: (r.date, r.time))

    async def login(self, email: str, display_name: str) -> StaffSession:
        return await self.gate.login(email, display_name)

    async def logout(self) -> None:
        await self.gate.logout()

    def current_session(self) -> Optional[StaffSession]:
        return self.gate.current_session
