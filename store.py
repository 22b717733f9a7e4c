"""Reservation collection with at most one reservation per (date, time)."""
import asyncio
import logging
from datetime import date
from typing import Dict, List, Optional

from conflicts import ensure_slot_available, find_occupant
from errors import NotFoundError
from models import Reservation
from persistence import PersistenceAdapter

logger = logging.getLogger(__name__)


class ReservationStore:
    def __init__(self, adapter: PersistenceAdapter, reservations: Optional[List[Reservation]] = None):
        self.adapter = adapter
        self._reservations: Dict[str, Reservation] = {}
        for reservation in reservations or []:
            # A stored collection must already hold the one-per-slot rule
            if reservation.id in self._reservations:
                raise ValueError(f"Duplicate reservation id {reservation.id} in stored collection.")
            ensure_slot_available(self._reservations.values(), reservation.date, reservation.time)
            self._reservations[reservation.id] = reservation.model_copy()
        self._lock = asyncio.Lock()

    @classmethod
    async def load(cls, adapter: PersistenceAdapter) -> "ReservationStore":
        return cls(adapter, await adapter.load_reservations())

    async def _commit(self, snapshot: Dict[str, Reservation]) -> None:
        # Adopt the new snapshot only once it is durable
        await self.adapter.save_reservations(list(snapshot.values()))
        self._reservations = snapshot

    async def create(self, reservation: Reservation) -> Reservation:
        async with self._lock:
            ensure_slot_available(self._reservations.values(), reservation.date, reservation.time)
            snapshot = dict(self._reservations)
            snapshot[reservation.id] = reservation.model_copy()
            await self._commit(snapshot)
        logger.info("Reservation %s created at %s %s", reservation.id, reservation.date, reservation.time)
        return reservation

    async def update(self, reservation: Reservation) -> Reservation:
        """Replace the reservation with the same id, possibly in another slot."""
        async with self._lock:
            current = self._reservations.get(reservation.id)
            if current is None:
                raise NotFoundError(reservation.id)
            # Target is checked before the old slot is vacated
            ensure_slot_available(
                self._reservations.values(), reservation.date, reservation.time, moving_id=reservation.id
            )
            snapshot = dict(self._reservations)
            snapshot[reservation.id] = reservation.model_copy()
            await self._commit(snapshot)
        if current.slot != reservation.slot:
            logger.info(
                "Reservation %s moved from %s %s to %s %s",
                reservation.id, current.date, current.time, reservation.date, reservation.time,
            )
        else:
            logger.info("Reservation %s updated", reservation.id)
        return reservation

    async def delete(self, reservation_id: str) -> Reservation:
        async with self._lock:
            if reservation_id not in self._reservations:
                raise NotFoundError(reservation_id)
            snapshot = dict(self._reservations)
            removed = snapshot.pop(reservation_id)
            await self._commit(snapshot)
        logger.info("Reservation %s deleted, %s %s is open", reservation_id, removed.date, removed.time)
        return removed

    def get(self, reservation_id: str) -> Reservation:
        reservation = self._reservations.get(reservation_id)
        if reservation is None:
            raise NotFoundError(reservation_id)
        return reservation.model_copy()

    def lookup(self, slot_date: date, slot_time: str) -> Optional[Reservation]:
        occupant = find_occupant(self._reservations.values(), slot_date, slot_time)
        return occupant.model_copy() if occupant is not None else None

    def list(self) -> List[Reservation]:
        return [reservation.model_copy() for reservation in self._reservations.values()]
