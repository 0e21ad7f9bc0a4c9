"""Value types and conversions for editable record fields."""

from __future__ import annotations

import datetime as _dt
from pathlib import Path
from typing import Iterable, Iterator

DATE_FORMAT = "yyyy-MM-dd"
IMAGE_SUFFIXES = frozenset({".png", ".jpg", ".bmp"})

GENDER_CHOICES = ("Man", "Female")
PROGRESS_CHOICES = ("0%", "20%", "40%", "60%", "80%", "100%")


class FieldError(ValueError):
    """Raised when a value does not fit its field."""


class ChoiceField:
    """A field whose value must be one of a fixed list of options."""

    def __init__(self, items: Iterable[str]) -> None:
        self.items = tuple(items)

    @property
    def default(self) -> str:
        """The first option, used when nothing has been chosen."""
        if not self.items:
            raise FieldError("no options to choose from")
        return self.items[0]

    def validate(self, value: str) -> str:
        """Return *value* if it is one of the options, else raise FieldError."""
        if value not in self.items:
            raise FieldError(f"{value!r} is not one of {list(self.items)}")
        return value

    def __contains__(self, value: object) -> bool:
        return value in self.items

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def format_date(value: _dt.date) -> str:
    """Format a date as year-month-day with zero padding."""
    if isinstance(value, _dt.datetime):
        value = value.date()
    if not isinstance(value, _dt.date):
        raise FieldError(f"not a date: {value!r}")
    return value.isoformat()


def parse_date(text: str) -> _dt.date:
    """Parse a year-month-day string into a date."""
    if not isinstance(text, str):
        raise FieldError(f"not a date string: {text!r}")
    try:
        return _dt.date.fromisoformat(text.strip())
    except ValueError as exc:
        raise FieldError(f"invalid date {text!r}, expected {DATE_FORMAT}") from exc


def read_image(path: str | Path) -> bytes:
    """Read an image file's raw bytes; only PNG, JPG and BMP files are accepted."""
    file_path = Path(path)
    if file_path.suffix.lower() not in IMAGE_SUFFIXES:
        raise FieldError(f"unsupported image file: {file_path.name}")
    try:
        return file_path.read_bytes()
    except OSError as exc:
        raise FieldError(f"cannot read image {file_path}: {exc}") from exc