"""Derive the bookable week: Monday to Friday of the current week, one slot per hour."""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List

from config import OPENING_HOUR, CLOSING_HOUR

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]


@dataclass(frozen=True)
class WeekDay:
    name: str
    date: date


@dataclass(frozen=True)
class WeekSlot:
    date: date
    time: str


def week_days(today: date) -> List[WeekDay]:
    # A Sunday belongs to the week that started six days earlier
    monday = today - timedelta(days=today.weekday())
    return [WeekDay(name, monday + timedelta(days=i)) for i, name in enumerate(DAY_NAMES)]


def hour_label(hour: int) -> str:
    return f"{hour:02d}:00"


def time_labels(opening_hour: int = OPENING_HOUR, closing_hour: int = CLOSING_HOUR) -> List[str]:
    return [hour_label(hour) for hour in range(opening_hour, closing_hour + 1)]


def week_slots(today: date, opening_hour: int = OPENING_HOUR, closing_hour: int = CLOSING_HOUR) -> List[WeekSlot]:
    labels = time_labels(opening_hour, closing_hour)
    return [WeekSlot(day.date, label) for day in week_days(today) for label in labels]


def display_time(label: str) -> str:
    """'13:00' -> '1:00 PM'"""
    hour = int(label.split(":")[0])
    twelve = hour - 12 if hour > 12 else (12 if hour == 0 else hour)
    return f"{twelve}:00 {'PM' if hour >= 12 else 'AM'}"
