from datetime import date


class BookingError(Exception):
    """Base class for every rejected booking operation."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DomainMismatchError(BookingError):
    """Login email does not carry the staff domain suffix."""

    status_code = 403

    def __init__(self, email: str, domain: str):
        super().__init__(f"Access restricted to staff ({domain} email required).")
        self.email = email
        self.domain = domain


class ValidationFailedError(BookingError):
    """A submitted field breaks a validation rule."""

    status_code = 400

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class SlotConflictError(BookingError):
    status_code = 409

    def __init__(self, slot_date: date, slot_time: str):
        super().__init__(
            f"Slot {slot_date.isoformat()} {slot_time} is already occupied. "
            "Please choose a different time."
        )
        self.slot_date = slot_date
        self.slot_time = slot_time


class PermissionDeniedError(BookingError):
    status_code = 403


class NotFoundError(BookingError):
    status_code = 404

    def __init__(self, reservation_id: str):
        super().__init__(f"Reservation {reservation_id} not found.")
        self.reservation_id = reservation_id
