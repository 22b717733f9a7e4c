from datetime import date

import pytest
from pydantic import ValidationError

from models import KeyValueRecord, Reservation, StaffSession
from persistence import RESERVATIONS_KEY


def reservation(slot_time):
    return Reservation(
        requester_name="Sam Rivera",
        requester_email="sam@example.com",
        date=date(2024, 6, 3),
        time=slot_time,
        purpose_message="Planning meeting",
    )


async def test_empty_store_loads_nothing(adapter):
    assert await adapter.load_reservations() == []
    assert await adapter.load_session() is None


async def test_save_overwrites_whole_collection(adapter):
    first, second = reservation("09:00"), reservation("10:00")
    await adapter.save_reservations([first, second])
    await adapter.save_reservations([second])
    assert await adapter.load_reservations() == [second]


async def test_reservation_fields_survive(adapter):
    block = reservation("11:00").model_copy(update={"is_administrative_block": True})
    await adapter.save_reservations([block])
    [loaded] = await adapter.load_reservations()
    assert loaded.id == block.id
    assert loaded.date == date(2024, 6, 3)
    assert loaded.is_administrative_block is True
    assert loaded.status == "occupied"


async def test_session_round_trip_and_removal(adapter):
    staff = StaffSession(email="jdoe@valdosta.edu", display_name="Jane Doe")
    await adapter.save_session(staff)
    assert await adapter.load_session() == staff
    await adapter.save_session(None)
    assert await adapter.load_session() is None
    # Removing an absent session is a no-op
    await adapter.save_session(None)


async def test_malformed_document_raises(adapter):
    async with adapter.session_factory() as session:
        session.add(KeyValueRecord(key=RESERVATIONS_KEY, value='[{"id": "x"}]'))
        await session.commit()
    with pytest.raises(ValidationError):
        await adapter.load_reservations()
