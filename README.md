# tutorbook

tutorbook keeps a small tutoring school's weekly lesson timetable in one
SQLite file. It has seven days, and each day has six lesson slots:

- Morning 1
- Morning 2
- Afternoon 1
- Afternoon 2
- Evening 1
- Evening 2

It is a library. You use it by importing its modules.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Database

`tutorbook.database.Database(path)` opens one SQLite file.

- `execute(sql, params)` runs one statement and returns all of its rows as
  a list of tuples.
- `transaction()` is a context manager. It commits when its block ends
  normally. It rolls back when an exception leaves the block.
- `open(path)` replaces the current connection with a new one.
- `set_path(path)` switches to another file. It does nothing if the path is
  the same as the current one.
- `close()` closes the connection and `is_open()` reports whether one is
  open.

A `Database` is also a context manager that closes itself when its block
ends. Failures are raised as `DatabaseError`.

`default_database()` returns one shared `Database` for `mydatabase.db` in
the current directory.

```python
from tutorbook.database import Database

with Database("school.db") as db:
    with db.transaction():
        db.execute("CREATE TABLE IF NOT EXISTS notes (text TEXT)")
        db.execute("INSERT INTO notes VALUES (?)", ("hello",))
```

## Schedule

`tutorbook.schedule` numbers weeks in its own way:

- Week 1 starts on the Monday on or before 1 January.
- Every later week starts seven days after the one before it.

For example, week 1 of 2025 runs from 2024-12-30 to 2025-01-05.

- `week_range(year, week)` returns that week's Monday and Sunday as dates.
- `day_headers(year, week)` returns the seven row headings. For week 2 of
  2025 the first is `"Monday\n01/06"`.
- `custom_week_number(day)` returns the week that contains a given date.

### Moving between weeks

`WeekSelection(year, week)` holds a week from 1 to 52, in a year between
2020 and five years after the current one. Out-of-range values raise
`ScheduleError`.

- `WeekSelection.current()` returns the selection for today.
- `previous()` and `next()` step one week at a time. At the ends of a year
  they move on to the neighbouring year. At the first or last selectable
  week they stay where they are.
- `date_range_label()` returns text such as `2025-01-06 to 2025-01-12`.

### Reading and writing lessons

`Schedule(database)` creates the `schedule` table if it is missing. In its
methods, `day` counts from 0 (Monday) to 6 and `slot` counts from 0 to 5.
A day or slot outside those ranges raises `ScheduleError`.

- `load_week(year, week)` returns the week as seven rows. Each row has one
  lesson text per slot, and an empty string where nothing is booked.
- `add_course(year, week, day, slot, student, time)` books a student into
  an empty slot and returns the stored text, for example
  `"Ann,09:00:00"`. If `time` is not given, it uses the slot's preset time:
  09:00, 11:00, 14:00, 16:00, 19:00 or 21:00. A slot that is already taken
  raises `SlotOccupiedError`.
- `set_cell(year, week, day, slot, text)` stores edited text and replaces
  whatever was in the slot. Blank text clears the slot.
- `delete_course(year, week, day, slot)` removes a lesson. A slot that
  holds nothing raises `EmptySlotError`.
- `student_names()` returns the `name` column of the `studentInfo` table.

Database failures inside these methods are raised as `ScheduleError`.

```python
from tutorbook.database import Database
from tutorbook.schedule import Schedule

schedule = Schedule(Database("school.db"))
schedule.add_course(2025, 2, 0, 0, "Ann")
print(schedule.load_week(2025, 2)[0][0])   # Ann,09:00:00
```

## Form fields

`tutorbook.fields` holds helpers for entered values. Bad input raises
`FieldError`.

- `ChoiceField(items)`:
  - `validate(value)` accepts only one of the listed choices.
  - `default` is the first choice.
  - The field supports `in`, iteration and `len()`.
  - `GENDER_CHOICES` and `PROGRESS_CHOICES` are ready-made choice lists.
- `format_date(value)` writes a date in `yyyy-mm-dd` form, and
  `parse_date(text)` reads one.
- `read_image(path)` returns the bytes of a `.png`, `.jpg` or `.bmp` file.

## What it does not do

- **No program to run.** tutorbook has no command and no screens. It is
  used only from Python code.
- **No student records.** It does not create, store or edit student
  records. `Schedule.student_names()` reads a `studentInfo` table with a
  `name` column, but tutorbook never creates that table. You must create
  and fill it yourself. Until you do, the call raises `DatabaseError`.