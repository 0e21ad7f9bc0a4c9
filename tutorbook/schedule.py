"""Weekly lesson timetable stored in the ``schedule`` table."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field, replace

from .database import Database, DatabaseError
from .fields import format_date, parse_date

DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
TIME_SLOTS = ("Morning 1", "Morning 2", "Afternoon 1", "Afternoon 2", "Evening 1", "Evening 2")
TIME_PRESETS = (
    _dt.time(9, 0),
    _dt.time(11, 0),
    _dt.time(14, 0),
    _dt.time(16, 0),
    _dt.time(19, 0),
    _dt.time(21, 0),
)
FIRST_YEAR = 2020
WEEKS_PER_YEAR = 52
YEARS_AHEAD = 5

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS schedule ("
    "date TEXT NOT NULL, time TEXT NOT NULL, course_name TEXT, "
    "UNIQUE(date, time))"
)


class ScheduleError(Exception):
    """Raised when a timetable operation cannot be carried out."""


class SlotOccupiedError(ScheduleError):
    """Raised when a course is added to a slot that already holds one."""


class EmptySlotError(ScheduleError):
    """Raised when deleting from a slot that holds no course."""


def custom_week_number(day: _dt.date) -> int:
    """Week of the year for *day*, counting the week holding 1 January as week 1."""
    start_of_year = _dt.date(day.year, 1, 1)
    days = (day - start_of_year).days
    return (days + start_of_year.isoweekday() - 1) // 7 + 1


def week_range(year: int, week: int) -> tuple[_dt.date, _dt.date]:
    """Monday and Sunday of the given week; week 1 starts on the Monday on or before 1 January."""
    start = _dt.date(year, 1, 1)
    start -= _dt.timedelta(days=start.isoweekday() - 1)
    week_start = start + _dt.timedelta(days=(week - 1) * 7)
    return week_start, week_start + _dt.timedelta(days=6)


def day_headers(year: int, week: int) -> list[str]:
    """Row headers of the form ``"<day name>\\nMM/DD"`` for every day of the week."""
    start, _ = week_range(year, week)
    return [
        f"{name}\n{(start + _dt.timedelta(days=offset)).strftime('%m/%d')}"
        for offset, name in enumerate(DAYS)
    ]


def _default_last_year() -> int:
    return _dt.date.today().year + YEARS_AHEAD


@dataclass(frozen=True)
class WeekSelection:
    """A chosen year and week, bounded by the years offered for selection."""

    year: int
    week: int
    first_year: int = FIRST_YEAR
    last_year: int = field(default_factory=_default_last_year)

    def __post_init__(self) -> None:
        if not self.first_year <= self.year <= self.last_year:
            raise ScheduleError(
                f"year {self.year} is outside {self.first_year}-{self.last_year}"
            )
        if not 1 <= self.week <= WEEKS_PER_YEAR:
            raise ScheduleError(f"week {self.week} is outside 1-{WEEKS_PER_YEAR}")

    @classmethod
    def current(cls, today: _dt.date | None = None) -> WeekSelection:
        """The selection for *today*; a week past the last selectable one falls back to week 1."""
        today = today or _dt.date.today()
        week = custom_week_number(today)
        if week > WEEKS_PER_YEAR:
            week = 1
        return cls(year=today.year, week=week, last_year=today.year + YEARS_AHEAD)

    def previous(self) -> WeekSelection:
        """The week before, wrapping to the last week of the previous year; stays put at the start."""
        if self.week > 1:
            return replace(self, week=self.week - 1)
        if self.year > self.first_year:
            return replace(self, year=self.year - 1, week=WEEKS_PER_YEAR)
        return self

    def next(self) -> WeekSelection:
        """The week after, wrapping to week 1 of the next year; stays put at the end."""
        if self.week < WEEKS_PER_YEAR:
            return replace(self, week=self.week + 1)
        if self.year < self.last_year:
            return replace(self, year=self.year + 1, week=1)
        return self

    def date_range_label(self) -> str:
        start, end = week_range(self.year, self.week)
        return f"{format_date(start)} to {format_date(end)}"


def _check_cell(day: int, slot: int) -> None:
    if not (0 <= day < len(DAYS) and 0 <= slot < len(TIME_SLOTS)):
        raise ScheduleError("Please select a time slot first!")


class Schedule:
    """Courses placed in a grid of days by time slots, one grid per week."""

    def __init__(self, database: Database) -> None:
        self.database = database
        self.database.execute(_CREATE_TABLE)

    def load_week(self, year: int, week: int) -> list[list[str]]:
        """Course names for the week, as seven rows of one entry per time slot."""
        start, end = week_range(year, week)
        grid = [["" for _ in TIME_SLOTS] for _ in DAYS]
        rows = self.database.execute(
            "SELECT date, time, course_name FROM schedule WHERE date BETWEEN ? AND ?",
            (format_date(start), format_date(end)),
        )
        for date_text, time_text, course in rows:
            try:
                day_index = (parse_date(str(date_text)) - start).days
            except ValueError:
                continue
            if 0 <= day_index < len(DAYS) and time_text in TIME_SLOTS:
                grid[day_index][TIME_SLOTS.index(time_text)] = "" if course is None else str(course)
        return grid

    def _cell_key(self, year: int, week: int, day: int, slot: int) -> tuple[str, str]:
        start, _ = week_range(year, week)
        return format_date(start + _dt.timedelta(days=day)), TIME_SLOTS[slot]

    def add_course(
        self,
        year: int,
        week: int,
        day: int,
        slot: int,
        student: str,
        time: _dt.time | None = None,
    ) -> str:
        """Book *student* into an empty slot and return the stored course text."""
        _check_cell(day, slot)
        if self.load_week(year, week)[day][slot]:
            raise SlotOccupiedError("This time slot is already occupied!")
        if time is None:
            time = TIME_PRESETS[slot]
        course_name = f"{student},{time.replace(microsecond=0).isoformat()}"
        date_text, slot_name = self._cell_key(year, week, day, slot)
        try:
            self.database.execute(
                "INSERT INTO schedule (date, time, course_name) VALUES (?, ?, ?)",
                (date_text, slot_name, course_name),
            )
        except DatabaseError as exc:
            raise ScheduleError(f"Failed to add course: {exc}") from exc
        return course_name

    def set_cell(self, year: int, week: int, day: int, slot: int, text: str) -> None:
        """Store edited cell text; blank text removes the course."""
        _check_cell(day, slot)
        course = text.strip()
        date_text, slot_name = self._cell_key(year, week, day, slot)
        try:
            if course:
                self.database.execute(
                    "INSERT OR REPLACE INTO schedule (date, time, course_name) VALUES (?, ?, ?)",
                    (date_text, slot_name, course),
                )
            else:
                self.database.execute(
                    "DELETE FROM schedule WHERE date = ? AND time = ?",
                    (date_text, slot_name),
                )
        except DatabaseError as exc:
            raise ScheduleError(f"Operation failed: {exc}") from exc

    def delete_course(self, year: int, week: int, day: int, slot: int) -> None:
        """Remove the course in a slot that holds one."""
        _check_cell(day, slot)
        if not self.load_week(year, week)[day][slot]:
            raise EmptySlotError("No course in this time slot!")
        date_text, slot_name = self._cell_key(year, week, day, slot)
        try:
            self.database.execute(
                "DELETE FROM schedule WHERE date = ? AND time = ?",
                (date_text, slot_name),
            )
        except DatabaseError as exc:
            raise ScheduleError(f"Deletion failed: {exc}") from exc

    def student_names(self) -> list[str]:
        """Names of all students, offered when booking a course."""
        return [str(name) for (name,) in self.database.execute("SELECT name FROM studentInfo")]