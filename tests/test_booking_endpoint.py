from __future__ import annotations

from dataclasses import replace

from fastapi import FastAPI
from fastapi.testclient import TestClient

from deskbooker.controllers.booking_controller import router
from deskbooker.repository.data_repository import DataRepository
from deskbooker.services.booking_service import DeskBookingRequestService
from deskbooker.utils.config import get_settings


def _build_test_settings(tmp_path, filename: str):
    base = get_settings()
    return replace(
        base,
        database_path=tmp_path / filename,
        seed_desk_descriptions=("Window desk", "Standing desk"),
    )


def _build_test_app(tmp_path, filename: str) -> tuple[FastAPI, DataRepository]:
    settings = _build_test_settings(tmp_path, filename)
    repository = DataRepository(settings)
    repository.initialize_database()
    repository.seed_desks()

    app = FastAPI()
    app.include_router(router)
    app.state.repository = repository
    app.state.booking_service = DeskBookingRequestService(
        desk_booking_repository=repository,
        desk_repository=repository,
    )
    return app, repository


def _payload(**overrides) -> dict[str, str]:
    payload = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "date": "2026-03-02",
    }
    payload.update(overrides)
    return payload


def test_book_desk_endpoint_books_desks_until_full(tmp_path):
    app, repository = _build_test_app(tmp_path, "endpoint_full.db")
    client = TestClient(app)

    first = client.post("/book_desk", json=_payload())
    second = client.post("/book_desk", json=_payload(first_name="Grace"))
    third = client.post("/book_desk", json=_payload(first_name="Alan"))

    assert first.status_code == 200
    first_body = first.json()
    assert first_body["code"] == "SUCCESS"
    assert first_body["first_name"] == "Ada"
    assert first_body["date"] == "2026-03-02"
    booking = repository.get_desk_booking(first_body["desk_booking_id"])
    assert booking is not None
    assert booking.desk_id == 1

    assert second.json()["code"] == "SUCCESS"
    assert repository.get_desk_booking(second.json()["desk_booking_id"]).desk_id == 2

    assert third.status_code == 200
    third_body = third.json()
    assert third_body["code"] == "NO_DESK_AVAILABLE"
    assert third_body["desk_booking_id"] is None
    assert third_body["first_name"] == "Alan"
    assert repository.count_desk_bookings() == 2


def test_available_desks_endpoint_reflects_bookings(tmp_path):
    app, _ = _build_test_app(tmp_path, "endpoint_available.db")
    client = TestClient(app)

    client.post("/book_desk", json=_payload())
    response = client.get("/available_desks", params={"date": "2026-03-02"})
    other_day = client.get("/available_desks", params={"date": "2026-03-03"})

    assert response.status_code == 200
    assert response.json() == {
        "date": "2026-03-02",
        "desks": [{"id": 2, "description": "Standing desk"}],
    }
    assert len(other_day.json()["desks"]) == 2


def test_get_desk_booking_endpoint(tmp_path):
    app, _ = _build_test_app(tmp_path, "endpoint_lookup.db")
    client = TestClient(app)

    booking_id = client.post("/book_desk", json=_payload()).json()["desk_booking_id"]
    found = client.get(f"/desk_bookings/{booking_id}")
    missing = client.get("/desk_bookings/999")

    assert found.status_code == 200
    assert found.json()["email"] == "ada@example.com"
    assert found.json()["desk_id"] == 1
    assert missing.status_code == 404


def test_book_desk_rejects_invalid_payload(tmp_path):
    app, repository = _build_test_app(tmp_path, "endpoint_invalid.db")
    client = TestClient(app)

    bad_email = client.post("/book_desk", json=_payload(email="not-an-email"))
    blank_name = client.post("/book_desk", json=_payload(first_name="   "))
    bad_date = client.post("/book_desk", json=_payload(date="2026-13-40"))

    assert bad_email.status_code == 422
    assert blank_name.status_code == 422
    assert bad_date.status_code == 422
    assert repository.count_desk_bookings() == 0


def test_endpoints_unavailable_without_wiring():
    app = FastAPI()
    app.include_router(router)
    client = TestClient(app)

    response = client.post("/book_desk", json=_payload())

    assert response.status_code == 503


def test_create_app_runs_startup_lifecycle(tmp_path):
    from app import create_app

    settings = _build_test_settings(tmp_path, "lifecycle.db")
    application = create_app(settings)

    with TestClient(application) as client:
        response = client.get("/available_desks", params={"date": "2026-03-02"})

    assert response.status_code == 200
    assert [desk["description"] for desk in response.json()["desks"]] == [
        "Window desk",
        "Standing desk",
    ]
