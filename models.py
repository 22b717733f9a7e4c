from typing import Optional
from datetime import date as _date
from uuid import uuid4
from sqlmodel import SQLModel, Field

OCCUPIED = "occupied"


class KeyValueRecord(SQLModel, table=True):
    """Opaque key-value substrate; each key holds one full JSON document."""

    __tablename__ = "kv_store"

    key: str = Field(primary_key=True, max_length=64)
    value: str


def new_reservation_id() -> str:
    return uuid4().hex


class Reservation(SQLModel):
    # Assigned once at creation, never changed by an edit
    id: str = Field(default_factory=new_reservation_id)
    requester_name: str
    requester_email: str
    date: _date
    time: str  # "09:00", one of the daily hour labels
    purpose_message: str
    is_administrative_block: bool = False
    status: str = OCCUPIED

    @property
    def slot(self) -> tuple[_date, str]:
        return (self.date, self.time)


class ReservationDraft(SQLModel):
    """What a requester or staff member submits for a create or an edit."""

    requester_name: str = ""
    requester_email: str = ""
    date: _date
    time: str
    purpose_message: Optional[str] = None
    is_administrative_block: bool = False


class StaffSession(SQLModel):
    email: str
    display_name: str
