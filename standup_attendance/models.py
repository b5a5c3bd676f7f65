"""Domain records and enumerations stored by the backend."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date, datetime


class UserRole(str, enum.Enum):
    """Role of a user; the value is the lower-case wire form."""

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"

    def __str__(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: str) -> "UserRole":
        """Read a stored role name; unknown names become EMPLOYEE."""
        for role in cls:
            if str(role) == value:
                return role
        return cls.EMPLOYEE


class AttendanceStatus(str, enum.Enum):
    """Attendance status of a day; the value is the lower-case wire form."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"

    def __str__(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: str) -> "AttendanceStatus":
        """Read a stored status name; unknown names become ABSENT."""
        for status in cls:
            if str(status) == value:
                return status
        return cls.ABSENT


@dataclass
class User:
    id: int
    name: str
    email: str
    password_hash: str
    role: UserRole
    team_id: int | None = None
    slack_user_id: str | None = None


@dataclass
class Team:
    id: int
    name: str
    description: str | None = None


@dataclass
class Attendance:
    id: int
    user_id: int
    date: date
    status: AttendanceStatus
    slack_message_timestamp: str | None = None


@dataclass
class Report:
    id: int
    month: date
    file_path: str
    created_at: datetime
    total_employees: int | None = None
    present_count: int | None = None
    absent_count: int | None = None