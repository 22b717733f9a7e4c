from datetime import date
from typing import Iterable, Optional

from config import ADMIN_BLOCK_MESSAGE, MIN_PURPOSE_LENGTH, STAFF_BLOCK_NAME, STAFF_EMAIL_DOMAIN
from errors import ValidationFailedError
from models import ReservationDraft, StaffSession
from week_grid import time_labels


def staff_sentinel_email(staff: Optional[StaffSession]) -> str:
    if staff is not None:
        return staff.email
    return "staff" + STAFF_EMAIL_DOMAIN


def validate_draft(draft: ReservationDraft, staff: Optional[StaffSession] = None) -> ReservationDraft:
    """Return the draft with fields normalised, or raise ValidationFailedError."""
    if draft.is_administrative_block:
        reason = (draft.purpose_message or "").strip()
        return draft.model_copy(update={
            "requester_name": STAFF_BLOCK_NAME,
            "requester_email": staff_sentinel_email(staff),
            "purpose_message": reason or ADMIN_BLOCK_MESSAGE,
        })

    if not draft.requester_name.strip():
        raise ValidationFailedError("requester_name", "Requester name is required.")
    if not draft.requester_email.strip():
        raise ValidationFailedError("requester_email", "Requester email is required.")
    message = draft.purpose_message or ""
    if len(message) < MIN_PURPOSE_LENGTH:
        raise ValidationFailedError(
            "purpose_message",
            f"Room reservation message must be at least {MIN_PURPOSE_LENGTH} characters.",
        )
    return draft.model_copy(update={
        "requester_name": draft.requester_name.strip(),
        "requester_email": draft.requester_email.strip(),
        "purpose_message": message,
    })


def validate_slot(slot_date: date, slot_time: str, allowed_dates: Optional[Iterable[date]] = None) -> None:
    """
    The time must be one of the daily hour labels and the date a weekday.
    When allowed_dates is given the date must also be one of them.
    """
    if slot_time not in time_labels():
        raise ValidationFailedError("time", f"{slot_time} is not a bookable hour.")
    if slot_date.weekday() > 4:
        raise ValidationFailedError("date", "Reservations are only possible Monday to Friday.")
    if allowed_dates is not None and slot_date not in set(allowed_dates):
        raise ValidationFailedError("date", f"{slot_date.isoformat()} is not in the current week.")
