"""A weekly lesson timetable stored in SQLite, with database and form-field helpers."""

__version__ = "0.1.0"