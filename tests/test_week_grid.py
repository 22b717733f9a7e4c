from datetime import date

from week_grid import display_time, time_labels, week_days, week_slots


def test_wednesday_yields_monday_to_friday_of_same_week():
    days = week_days(date(2024, 6, 5))
    assert [d.name for d in days] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    assert [d.date for d in days] == [date(2024, 6, d) for d in range(3, 8)]


def test_sunday_belongs_to_the_week_that_started_before_it():
    days = week_days(date(2024, 6, 9))
    assert days[0].date == date(2024, 6, 3)
    assert days[-1].date == date(2024, 6, 7)


def test_monday_and_friday_anchor_the_same_week():
    assert week_days(date(2024, 6, 3)) == week_days(date(2024, 6, 7))


def test_week_crossing_month_boundary():
    days = week_days(date(2024, 7, 31))
    assert days[0].date == date(2024, 7, 29)
    assert days[-1].date == date(2024, 8, 2)


def test_time_labels_are_inclusive_and_zero_padded():
    labels = time_labels(8, 16)
    assert len(labels) == 16 - 8 + 1
    assert labels[0] == "08:00"
    assert labels[-1] == "16:00"


def test_single_hour_day():
    assert time_labels(12, 12) == ["12:00"]


def test_week_slots_is_days_times_labels():
    slots = week_slots(date(2024, 6, 5), 8, 16)
    assert len(slots) == 5 * 9
    assert slots[0].date == date(2024, 6, 3) and slots[0].time == "08:00"
    assert len(set(slots)) == len(slots)


def test_derivation_is_repeatable():
    assert week_slots(date(2024, 6, 5)) == week_slots(date(2024, 6, 5))


def test_display_time():
    assert display_time("08:00") == "8:00 AM"
    assert display_time("12:00") == "12:00 PM"
    assert display_time("16:00") == "4:00 PM"
