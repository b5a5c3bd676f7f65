# standup-attendance

A small web backend for keeping track of who showed up to the daily standup.
It stores users, attendance records and monthly reports in a SQLite
database and serves an HTTP application built with Flask.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the server

The server is configured through environment variables. At start-up the
file `.env` in the working directory is read; another file can be named
with `--env-file`.

| Variable       | Meaning                              | Default     |
|----------------|--------------------------------------|-------------|
| `DATABASE_URL` | SQLite database to use (required)    | none        |
| `SERVER_HOST`  | address to listen on                 | `127.0.0.1` |
| `SERVER_PORT`  | port to listen on, 0–65535           | `8080`      |

`DATABASE_URL` may be a file path, `:memory:`, or a URL of the form
`sqlite:///path/to/file.db`. Other URL schemes are rejected.

Start it with:

```
standup-attendance
standup-attendance --env-file settings.env
```

On start the tables are created if they do not exist yet. The command
prints an error and exits with status 1 if `DATABASE_URL` is missing or
unusable, or if `SERVER_PORT` is not a valid port number.

## HTTP endpoints

- `GET /attendance` — a JSON list of attendance records, each with
  `user_id`, `date` and `status`. The query parameters `user_id`, `team`
  and `date` are accepted but do not yet filter anything: the endpoint
  returns a single fixed sample record.
- `GET /dashboard/summary` — a JSON object with `month`,
  `total_employees`, `present_count` and `absent_count`. The figures are
  fixed sample values, not read from the database.

## Using the library

The database layer, services and web application can be used directly:

```python
import datetime

from standup_attendance.app import create_app
from standup_attendance.models import AttendanceStatus, UserRole
from standup_attendance.queries import DatabaseQueries, connect
from standup_attendance.services import AttendanceService, ReportService

queries = DatabaseQueries(connect("attendance.db"))
queries.create_schema()

user_id = queries.create_user(
    "Test User", "test_user@example.com", "hashed", UserRole.EMPLOYEE, None
)

attendance = AttendanceService(queries)
attendance.log_attendance(
    user_id, datetime.date.today(), AttendanceStatus.PRESENT, "Daily standup completed"
)
records = attendance.get_user_attendance(user_id, None, None)

reports = ReportService(queries)
reports.generate_monthly_report(
    datetime.date(2025, 7, 1), "reports/2025-07.csv", 10, 8, 2
)
report = reports.get_monthly_report(datetime.date(2025, 7, 1))

app = create_app(queries)
```

`DatabaseQueries` also offers `find_user_by_email` and
`find_user_by_slack_id`, which return a `User` or `None`.

Logging attendance twice for the same user and day replaces the earlier
status and message and keeps the same record id. `get_user_attendance`
takes an optional start and end date, both inclusive; either bound may be
left as `None`. Records come back ordered by date.

`AttendanceService` raises `ValueError` for a user id that is negative or
does not fit in a signed 64-bit integer. Monthly reports with a negative
count are rejected with `ValueError`. `get_monthly_report` returns `None`
when no report exists for the month.

`ServerSettings.from_env` reads the settings described above from a
mapping, or from `os.environ` when none is given.

Roles and statuses are stored as `Admin`, `Manager`, `Employee` and
`Present`, `Absent`, `Late`, and read back leniently:
`UserRole.parse` falls back to `EMPLOYEE` and `AttendanceStatus.parse`
falls back to `ABSENT` for any unknown value.

## Errors

Failures are raised as subclasses of
`standup_attendance.errors.SlackAttendanceError`: `DatabaseError`,
`SlackApiError`, `AuthenticationError` and `InternalError`. Any SQLite
failure surfaces as `DatabaseError`.

## What this package does not do

- There are no login or registration endpoints, and no password hashing
  or token handling; users can only be added through `DatabaseQueries`.
- Slack events are not received: there is no endpoint for Slack event
  callbacks, no request-signature checking and no parsing of standup
  messages.
- The HTTP endpoints do not yet read from the database, and there is no
  generation of report files; a report only records a file path and counts.
- Only SQLite is supported as storage.