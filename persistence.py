"""Full-snapshot key-value storage; the last full write wins."""
import logging
from typing import List, Optional

from pydantic import TypeAdapter

from models import KeyValueRecord, Reservation, StaffSession

logger = logging.getLogger(__name__)

RESERVATIONS_KEY = "room-reservations"
STAFF_SESSION_KEY = "staff-session"

_reservation_list = TypeAdapter(List[Reservation])


class PersistenceAdapter:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    async def _read(self, key: str) -> Optional[str]:
        async with self.session_factory() as session:
            record = await session.get(KeyValueRecord, key)
            return record.value if record else None

    async def _write(self, key: str, value: Optional[str]) -> None:
        async with self.session_factory() as session:
            record = await session.get(KeyValueRecord, key)
            if value is None:
                if record is not None:
                    await session.delete(record)
            elif record is None:
                session.add(KeyValueRecord(key=key, value=value))
            else:
                record.value = value
            await session.commit()

    async def load_reservations(self) -> List[Reservation]:
        raw = await self._read(RESERVATIONS_KEY)
        if raw is None:
            return []
        reservations = _reservation_list.validate_json(raw)
        logger.debug("Loaded %d reservations", len(reservations))
        return reservations

    async def save_reservations(self, reservations: List[Reservation]) -> None:
        await self._write(RESERVATIONS_KEY, _reservation_list.dump_json(reservations).decode())
        logger.debug("Wrote snapshot of %d reservations", len(reservations))

    async def load_session(self) -> Optional[StaffSession]:
        raw = await self._read(STAFF_SESSION_KEY)
        if raw is None:
            return None
        return StaffSession.model_validate_json(raw)

    async def save_session(self, staff: Optional[StaffSession]) -> None:
        await self._write(STAFF_SESSION_KEY, staff.model_dump_json() if staff else None)
