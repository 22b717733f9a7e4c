import logging
from datetime import date as _date
from typing import List, Optional

from fastapi import FastAPI, Depends, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from auth import Actor, AuthorizationGate
from booking_service import BookingService
from config import LOG_LEVEL
from database import SessionLocal, init_db
from errors import BookingError, ValidationFailedError
from models import Reservation, ReservationDraft, StaffSession
from persistence import PersistenceAdapter
from store import ReservationStore
from week_grid import display_time

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Meeting Room Booking System")


# Pydantic Schemas for Request/Response
class LoginRequest(BaseModel):
    email: str
    display_name: str


class SlotStatus(BaseModel):
    time: str
    time_label: str
    status: str
    # Only filled in for staff
    reservation_id: Optional[str] = None
    requester_name: Optional[str] = None
    requester_email: Optional[str] = None
    purpose_message: Optional[str] = None


class DaySchedule(BaseModel):
    name: str
    date: _date
    is_today: bool
    schedule: List[SlotStatus]


class WeekGridResponse(BaseModel):
    viewer: Actor
    times: List[str]
    days: List[DaySchedule]


class BookingCreated(BaseModel):
    message: str
    id: str


@app.on_event("startup")
async def on_startup():
    await init_db()
    adapter = PersistenceAdapter(SessionLocal)
    gate = await AuthorizationGate.restore(adapter)
    store = await ReservationStore.load(adapter)
    app.state.booking_service = BookingService(gate, store)
    logger.info("Booking service ready with %d reservations", len(store.list()))


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


@app.exception_handler(BookingError)
async def booking_error_handler(request: Request, exc: BookingError):
    content = {"detail": exc.message, "error": type(exc).__name__}
    if isinstance(exc, ValidationFailedError):
        content["field"] = exc.field
    return JSONResponse(status_code=exc.status_code, content=content)


# --- GET /dashboard-grid ---
@app.get("/dashboard-grid", response_model=WeekGridResponse)
async def get_dashboard_grid(service: BookingService = Depends(get_booking_service)):
    grid = service.week_grid()
    viewer = service.gate.classify()
    today = service.today()

    # Key: slot date -> that day's rows in time order
    rows = {day.date: [] for day in grid.days}
    for slot in grid.slots:
        entry = SlotStatus(time=slot.time, time_label=display_time(slot.time), status=slot.status)
        if viewer is Actor.STAFF and slot.reservation is not None:
            entry.reservation_id = slot.reservation.id
            entry.requester_name = slot.reservation.requester_name
            entry.requester_email = slot.reservation.requester_email
            entry.purpose_message = slot.reservation.purpose_message
        rows[slot.date].append(entry)

    days = [
        DaySchedule(name=day.name, date=day.date, is_today=day.date == today, schedule=rows[day.date])
        for day in grid.days
    ]
    return WeekGridResponse(viewer=viewer, times=grid.times, days=days)


# --- POST /book-slot ---
@app.post("/book-slot", status_code=status.HTTP_201_CREATED, response_model=BookingCreated)
async def book_slot(draft: ReservationDraft, service: BookingService = Depends(get_booking_service)):
    reservation = await service.book(draft)
    return BookingCreated(message="Booking successful", id=reservation.id)


# --- Staff management ---
@app.get("/reservations", response_model=List[Reservation])
async def list_reservations(service: BookingService = Depends(get_booking_service)):
    return service.list_reservations()


@app.get("/reservations/{reservation_id}", response_model=Reservation)
async def get_reservation(reservation_id: str, service: BookingService = Depends(get_booking_service)):
    return service.get_reservation(reservation_id)


@app.put("/reservations/{reservation_id}", response_model=Reservation)
async def update_reservation(
    reservation_id: str,
    draft: ReservationDraft,
    service: BookingService = Depends(get_booking_service),
):
    return await service.edit(reservation_id, draft)


@app.delete("/reservations/{reservation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reservation(reservation_id: str, service: BookingService = Depends(get_booking_service)):
    await service.cancel(reservation_id)


# --- Staff session ---
@app.post("/staff/login", response_model=StaffSession)
async def staff_login(payload: LoginRequest, service: BookingService = Depends(get_booking_service)):
    return await service.login(payload.email, payload.display_name)


@app.post("/staff/logout", status_code=status.HTTP_204_NO_CONTENT)
async def staff_logout(service: BookingService = Depends(get_booking_service)):
    await service.logout()


@app.get("/staff/session", response_model=Optional[StaffSession])
async def staff_session(service: BookingService = Depends(get_booking_service)):
    return service.current_session()


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
