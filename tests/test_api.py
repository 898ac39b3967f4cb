"""HTTP tests for the calendar and timetable endpoints."""

from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.dialects import postgresql

from app.api import deps
from app.core.security import create_access_token
from app.db.session import get_db
from app.main import app
from app.services.calendar_service import CalendarService
from factories import BrokenQuizSource, BrokenScopeSource, FakeCalendarSource, make_assignment, make_slot


def auth_header(user_id, role):
    token = create_access_token({"sub": user_id, "type": role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def calendar_source(python_course, az_only_course):
    return FakeCalendarSource(
        courses=[python_course, az_only_course],
        schedules=[
            make_slot("slot-1", course_id="course-1", day_of_week=3, room="A-101"),
            make_slot("slot-2", course_id="course-2", day_of_week=6, start_time="14:00", end_time="16:00"),
        ],
        assignments=[make_assignment("as-1", course_id="course-1", due_date=datetime(2025, 1, 4, 0, 0))],
        student_courses={"stu-1": ["course-1", "course-2"]},
    )


@pytest.fixture
def use_source(calendar_source):
    def override(source=calendar_source):
        app.dependency_overrides[deps.get_calendar_service] = lambda: CalendarService(source)
    return override


def scalars_result(items):
    result = MagicMock()
    result.scalars.return_value.all.return_value = items
    return result


def compiled_sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}))


class TestCalendarEndpoint:
    """Tests for GET /api/v1/calendar/events."""

    def test_returns_sorted_events_in_envelope(self, client, use_source):
        use_source()

        response = client.get(
            "/api/v1/calendar/events",
            params={"from": "2025-01-01", "to": "2025-01-07"},
            headers=auth_header("stu-1", "student"),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [e["id"] for e in body["data"]] == [
            "schedule-slot-1-2025-01-01",
            "schedule-slot-2-2025-01-04",
            "assignment-as-1",
        ]

    def test_event_payload_shape(self, client, use_source):
        use_source()

        response = client.get(
            "/api/v1/calendar/events",
            params={"from": "2025-01-01", "to": "2025-01-07"},
            headers=auth_header("stu-1", "student"),
        )
        lesson, saturday_lesson, assignment = response.json()["data"]

        assert lesson == {
            "id": "schedule-slot-1-2025-01-01",
            "title": "Python Basics",
            "date": "2025-01-01",
            "time": "10:00",
            "endTime": "11:30",
            "type": "lesson",
            "courseId": "course-1",
            "courseTitle": "Python Basics",
            "color": "#22c55e",
            "room": "A-101",
        }
        assert "room" not in saturday_lesson
        assert saturday_lesson["courseTitle"] == "UI dizayn"
        assert assignment["time"] is None
        assert assignment["endTime"] is None

    def test_empty_scope_is_success(self, client, use_source):
        use_source()

        response = client.get(
            "/api/v1/calendar/events",
            params={"from": "2025-01-01", "to": "2025-01-07"},
            headers=auth_header("tch-1", "teacher"),
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}

    def test_missing_bounds(self, client, use_source):
        use_source()

        response = client.get(
            "/api/v1/calendar/events",
            params={"from": "2025-01-01"},
            headers=auth_header("stu-1", "student"),
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Query params 'from' and 'to' (ISO date) are required",
        }

    def test_invalid_date_format(self, client, use_source):
        use_source()

        response = client.get(
            "/api/v1/calendar/events",
            params={"from": "01/01/2025", "to": "2025-01-07"},
            headers=auth_header("stu-1", "student"),
        )

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert response.json()["message"].startswith("Invalid date format")

    def test_requires_token(self, client, use_source):
        use_source()

        response = client.get("/api/v1/calendar/events", params={"from": "2025-01-01", "to": "2025-01-07"})

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Unauthorized"}

    def test_rejects_expired_token(self, client, use_source):
        use_source()
        token = create_access_token({"sub": "stu-1", "type": "student"}, expires_delta=timedelta(minutes=-5))

        response = client.get(
            "/api/v1/calendar/events",
            params={"from": "2025-01-01", "to": "2025-01-07"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401

    def test_store_failure_is_server_error(self, client, use_source):
        use_source(BrokenQuizSource(student_courses={"stu-1": ["course-1"]}))

        response = client.get(
            "/api/v1/calendar/events",
            params={"from": "2025-01-01", "to": "2025-01-07"},
            headers=auth_header("stu-1", "student"),
        )

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Failed to load calendar events"}

    def test_scope_lookup_failure_is_server_error(self, client, use_source):
        use_source(BrokenScopeSource())

        response = client.get(
            "/api/v1/calendar/events",
            params={"from": "2025-01-01", "to": "2025-01-07"},
            headers=auth_header("stu-1", "student"),
        )

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Failed to load calendar events"}

    def test_window_at_end_of_calendar(self, client, use_source):
        use_source()

        response = client.get(
            "/api/v1/calendar/events",
            params={"from": "9999-12-25", "to": "9999-12-31"},
            headers=auth_header("stu-1", "student"),
        )

        assert response.status_code == 200
        assert [e["id"] for e in response.json()["data"]] == [
            "schedule-slot-2-9999-12-25",
            "schedule-slot-1-9999-12-29",
        ]


class TestTimetableEndpoint:
    """Tests for GET /api/v1/schedule."""

    @pytest.fixture
    def mock_db(self):
        db = AsyncMock()
        db.execute = AsyncMock()
        app.dependency_overrides[get_db] = lambda: db
        return db

    @pytest.fixture
    def slot(self, az_only_course):
        slot = make_slot("slot-2", course_id="course-2", day_of_week=6, start_time="14:00", end_time="16:00")
        slot.course = az_only_course
        return slot

    def test_student_timetable(self, client, mock_db, slot):
        mock_db.execute.side_effect = [scalars_result(["course-2"]), scalars_result([slot])]

        response = client.get("/api/v1/schedule", headers=auth_header("stu-1", "student"))

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == [{
            "id": "slot-2",
            "courseId": "course-2",
            "courseTitle": "UI dizayn",
            "teacherId": None,
            "dayOfWeek": 6,
            "startTime": "14:00",
            "endTime": "16:00",
            "room": None,
            "isActive": True,
        }]
        assert mock_db.execute.await_count == 2

    def test_anonymous_timetable_lists_everything(self, client, mock_db, slot):
        mock_db.execute.side_effect = [scalars_result([slot])]

        response = client.get("/api/v1/schedule")

        assert response.status_code == 200
        assert [s["id"] for s in response.json()["data"]] == ["slot-2"]
        assert mock_db.execute.await_count == 1

    def test_invalid_token_is_treated_as_anonymous(self, client, mock_db, slot):
        mock_db.execute.side_effect = [scalars_result([slot])]

        response = client.get("/api/v1/schedule", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 200
        assert mock_db.execute.await_count == 1

    def test_teacher_timetable_includes_own_slots(self, client, mock_db, slot):
        mock_db.execute.side_effect = [scalars_result(["course-1"]), scalars_result([slot])]

        response = client.get("/api/v1/schedule", headers=auth_header("tch-1", "teacher"))

        assert response.status_code == 200
        assert [s["id"] for s in response.json()["data"]] == ["slot-2"]
        sql = compiled_sql(mock_db.execute.await_args_list[1].args[0])
        assert "'course-1'" in sql
        assert "schedules.teacher_id = 'tch-1'" in sql

    def test_course_filter(self, client, mock_db, slot):
        mock_db.execute.side_effect = [scalars_result([slot])]

        response = client.get("/api/v1/schedule", params={"courseId": "course-2"})

        assert response.status_code == 200
        assert [s["courseId"] for s in response.json()["data"]] == ["course-2"]
        assert "schedules.course_id = 'course-2'" in compiled_sql(mock_db.execute.await_args.args[0])


def test_health(client):
    assert client.get("/").json()["status"] == "ok"
