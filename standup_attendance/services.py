"""Attendance and report services built on top of the database queries."""

from __future__ import annotations

from datetime import date

from .models import Attendance, AttendanceStatus, Report
from .queries import DatabaseQueries

_MAX_USER_ID = 2**63 - 1


def _checked_user_id(user_id: int) -> int:
    if not 0 <= user_id <= _MAX_USER_ID:
        raise ValueError(f"user id out of range: {user_id}")
    return user_id


class AttendanceService:
    """Records and reads daily attendance of users."""

    def __init__(self, queries: DatabaseQueries) -> None:
        self._queries = queries

    def log_attendance(
        self,
        user_id: int,
        date: date,
        status: AttendanceStatus,
        message: str | None = None,
    ) -> None:
        """Record a user's status for a day, replacing any earlier entry."""
        self._queries.log_attendance(_checked_user_id(user_id), date, status, message)

    def get_user_attendance(
        self,
        user_id: int,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Attendance]:
        """Return a user's records, optionally bounded by inclusive dates."""
        return self._queries.get_user_attendance(
            _checked_user_id(user_id), start_date, end_date
        )


class ReportService:
    """Stores and looks up monthly attendance reports."""

    def __init__(self, queries: DatabaseQueries) -> None:
        self._queries = queries

    def generate_monthly_report(
        self,
        month: date,
        file_path: str,
        total_employees: int,
        present_count: int,
        absent_count: int,
    ) -> int:
        """Store a monthly report and return its id."""
        return self._queries.create_monthly_report(
            month, file_path, total_employees, present_count, absent_count
        )

    def get_monthly_report(self, month: date) -> Report | None:
        return self._queries.get_monthly_report(month)