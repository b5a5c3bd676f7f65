from datetime import date, datetime

import pytest

from standup_attendance.models import (
    Attendance,
    AttendanceStatus,
    Report,
    Team,
    User,
    UserRole,
)


@pytest.mark.parametrize(
    "role, text",
    [(UserRole.ADMIN, "Admin"), (UserRole.MANAGER, "Manager"), (UserRole.EMPLOYEE, "Employee")],
)
def test_user_role_display(role, text):
    assert str(role) == text


@pytest.mark.parametrize("role", list(UserRole))
def test_user_role_round_trip(role):
    assert UserRole.parse(str(role)) is role


@pytest.mark.parametrize("value", ["admin", "", "Superuser"])
def test_user_role_unknown_defaults_to_employee(value):
    assert UserRole.parse(value) is UserRole.EMPLOYEE


def test_user_role_wire_values_are_lowercase():
    assert UserRole("manager") is UserRole.MANAGER
    assert [r.value for r in UserRole] == [str(r).lower() for r in UserRole]


@pytest.mark.parametrize(
    "status, text",
    [
        (AttendanceStatus.PRESENT, "Present"),
        (AttendanceStatus.ABSENT, "Absent"),
        (AttendanceStatus.LATE, "Late"),
    ],
)
def test_status_display(status, text):
    assert str(status) == text


@pytest.mark.parametrize("status", list(AttendanceStatus))
def test_status_round_trip(status):
    assert AttendanceStatus.parse(str(status)) is status


@pytest.mark.parametrize("value", ["present", "Sick", ""])
def test_status_unknown_defaults_to_absent(value):
    assert AttendanceStatus.parse(value) is AttendanceStatus.ABSENT


def test_record_defaults():
    user = User(1, "Ann", "ann@example.com", "hash", UserRole.ADMIN)
    assert user.team_id is None and user.slack_user_id is None
    team = Team(2, "Core")
    assert team.description is None
    record = Attendance(3, 1, date(2024, 1, 1), AttendanceStatus.LATE)
    assert record.slack_message_timestamp is None
    report = Report(4, date(2024, 1, 1), "r.csv", datetime(2024, 2, 1, 9, 0))
    assert (report.total_employees, report.present_count, report.absent_count) == (
        None,
        None,
        None,
    )