"""Persistence of users, attendance and monthly reports in SQLite."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import date, datetime, timezone
from typing import Iterator

from .errors import DatabaseError
from .models import Attendance, AttendanceStatus, Report, User, UserRole

_SCHEMA = """
CREATE TABLE IF NOT EXISTS teams (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    description TEXT
);
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    role TEXT NOT NULL,
    team_id INTEGER REFERENCES teams(id),
    slack_user_id TEXT UNIQUE
);
CREATE TABLE IF NOT EXISTS attendance (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL REFERENCES users(id),
    date TEXT NOT NULL,
    status TEXT NOT NULL,
    slack_message_timestamp TEXT,
    UNIQUE (user_id, date)
);
CREATE TABLE IF NOT EXISTS reports (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    month TEXT NOT NULL,
    file_path TEXT NOT NULL,
    created_at TEXT DEFAULT CURRENT_TIMESTAMP,
    total_employees INTEGER,
    present_count INTEGER,
    absent_count INTEGER
);
"""

_USER_COLUMNS = "id, name, email, password_hash, role, slack_user_id, team_id"
_ATTENDANCE_COLUMNS = "id, user_id, date, status, slack_message_timestamp"


def connect(database_url: str) -> sqlite3.Connection:
    """Open a SQLite database given a path, ':memory:' or a sqlite:// URL."""
    path = database_url
    if path.startswith("sqlite:///"):
        path = path[len("sqlite:///"):]
    elif path.startswith("sqlite://"):
        path = path[len("sqlite://"):]
    elif "://" in path:
        raise ValueError(f"unsupported database URL: {database_url}")
    if not path:
        raise ValueError("database URL names no database")
    try:
        connection = sqlite3.connect(path, check_same_thread=False)
        connection.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error as exc:
        raise DatabaseError(exc) from exc
    return connection


@contextmanager
def _database_errors() -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as exc:
        raise DatabaseError(exc) from exc


def _user_from_row(row: tuple) -> User:
    user_id, name, email, password_hash, role, slack_user_id, team_id = row
    return User(
        id=int(user_id),
        name=name,
        email=email,
        password_hash=password_hash,
        role=UserRole.parse(role),
        team_id=None if team_id is None else int(team_id),
        slack_user_id=slack_user_id,
    )


def _attendance_from_row(row: tuple) -> Attendance:
    record_id, user_id, day, status, timestamp = row
    return Attendance(
        id=int(record_id),
        user_id=int(user_id),
        date=date.fromisoformat(day),
        status=AttendanceStatus.parse(status),
        slack_message_timestamp=timestamp,
    )


def _check_count(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


class DatabaseQueries:
    """All reads and writes the backend performs on its database."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def create_schema(self) -> None:
        """Create the tables if they do not exist yet."""
        with _database_errors():
            self._connection.executescript(_SCHEMA)
            self._connection.commit()

    # --- users ---

    def create_user(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: UserRole,
        slack_user_id: str | None = None,
    ) -> int:
        """Insert a user and return the new id."""
        with _database_errors(), self._connection:
            cursor = self._connection.execute(
                "INSERT INTO users (name, email, password_hash, role, slack_user_id) "
                "VALUES (?, ?, ?, ?, ?)",
                (name, email, password_hash, str(role), slack_user_id),
            )
        return int(cursor.lastrowid)

    def find_user_by_email(self, email: str) -> User | None:
        with _database_errors():
            row = self._connection.execute(
                f"SELECT {_USER_COLUMNS} FROM users WHERE email = ?", (email,)
            ).fetchone()
        return None if row is None else _user_from_row(row)

    def find_user_by_slack_id(self, slack_user_id: str) -> User | None:
        with _database_errors():
            row = self._connection.execute(
                f"SELECT {_USER_COLUMNS} FROM users WHERE slack_user_id = ?",
                (slack_user_id,),
            ).fetchone()
        return None if row is None else _user_from_row(row)

    # --- attendance ---

    def log_attendance(
        self,
        user_id: int,
        date: date,
        status: AttendanceStatus,
        slack_message_timestamp: str | None = None,
    ) -> int:
        """Record a user's status for a day, replacing any earlier entry; return its id."""
        day = date.isoformat()
        with _database_errors(), self._connection:
            self._connection.execute(
                "INSERT INTO attendance (user_id, date, status, slack_message_timestamp) "
                "VALUES (?, ?, ?, ?) "
                "ON CONFLICT (user_id, date) DO UPDATE SET "
                "status = excluded.status, "
                "slack_message_timestamp = excluded.slack_message_timestamp",
                (user_id, day, str(status), slack_message_timestamp),
            )
            (record_id,) = self._connection.execute(
                "SELECT id FROM attendance WHERE user_id = ? AND date = ?",
                (user_id, day),
            ).fetchone()
        return int(record_id)

    def get_user_attendance(
        self,
        user_id: int,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Attendance]:
        """Return a user's records, optionally bounded by inclusive dates."""
        conditions = ["user_id = ?"]
        params: list[object] = [user_id]
        if start_date is not None:
            conditions.append("date >= ?")
            params.append(start_date.isoformat())
        if end_date is not None:
            conditions.append("date <= ?")
            params.append(end_date.isoformat())
        sql = (
            f"SELECT {_ATTENDANCE_COLUMNS} FROM attendance "
            f"WHERE {' AND '.join(conditions)} ORDER BY date, id"
        )
        with _database_errors():
            rows = self._connection.execute(sql, params).fetchall()
        return [_attendance_from_row(row) for row in rows]

    # --- reports ---

    def create_monthly_report(
        self,
        month: date,
        file_path: str,
        total_employees: int,
        present_count: int,
        absent_count: int,
    ) -> int:
        """Insert a monthly report and return its id."""
        counts = (
            _check_count("total_employees", total_employees),
            _check_count("present_count", present_count),
            _check_count("absent_count", absent_count),
        )
        with _database_errors(), self._connection:
            cursor = self._connection.execute(
                "INSERT INTO reports "
                "(month, file_path, total_employees, present_count, absent_count) "
                "VALUES (?, ?, ?, ?, ?)",
                (month.isoformat(), file_path, *counts),
            )
        return int(cursor.lastrowid)

    def get_monthly_report(self, month: date) -> Report | None:
        with _database_errors():
            row = self._connection.execute(
                "SELECT id, month, file_path, created_at, total_employees, "
                "present_count, absent_count FROM reports WHERE month = ?",
                (month.isoformat(),),
            ).fetchone()
        if row is None:
            return None
        report_id, stored_month, file_path, created_at, total, present, absent = row
        try:
            parsed_month = date.fromisoformat(stored_month)
        except (TypeError, ValueError):
            parsed_month = month
        if created_at is None:
            created = datetime.now(timezone.utc).replace(tzinfo=None)
        else:
            created = datetime.fromisoformat(created_at)
        return Report(
            id=int(report_id),
            month=parsed_month,
            file_path=file_path,
            created_at=created,
            total_employees=total,
            present_count=present,
            absent_count=absent,
        )