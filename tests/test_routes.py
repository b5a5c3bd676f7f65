import pytest
from flask import Flask

from standup_attendance.routes import (
    AttendanceQuery,
    AttendanceRecord,
    MonthlyReport,
    create_blueprint,
)


@pytest.fixture
def client():
    app = Flask(__name__)
    app.register_blueprint(create_blueprint())
    return app.test_client()


def test_attendance_listing(client):
    response = client.get("/attendance")
    assert response.status_code == 200
    assert response.get_json() == [
        {"user_id": "user1", "date": "2024-01-01", "status": "Present"}
    ]


def test_attendance_accepts_filters(client):
    plain = client.get("/attendance").get_json()
    filtered = client.get("/attendance?user_id=u7&team=core&date=2024-01-01")
    assert filtered.status_code == 200
    assert filtered.get_json() == plain


def test_summary(client):
    response = client.get("/dashboard/summary")
    assert response.status_code == 200
    assert response.get_json() == {
        "month": "July 2025",
        "total_employees": 10,
        "present_count": 8,
        "absent_count": 2,
    }


def test_post_not_allowed(client):
    assert client.post("/attendance").status_code == 405


def test_unknown_path(client):
    assert client.get("/nowhere").status_code == 404


def test_dataclass_defaults_and_equality():
    assert AttendanceQuery() == AttendanceQuery(user_id=None, team=None, date=None)
    record = AttendanceRecord(user_id="user1", date="2024-01-01", status="Present")
    assert record == AttendanceRecord("user1", "2024-01-01", "Present")
    report = MonthlyReport("July 2025", 10, 8, 2)
    assert report.present_count + report.absent_count == report.total_employees