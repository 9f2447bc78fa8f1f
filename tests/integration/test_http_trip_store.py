"""Tests for the HTTP document-store trip repository."""

import json
from typing import Any

import httpx
import pytest

from tripsync.adapters.remote_store import HttpTripRepository
from tripsync.config import Settings
from tripsync.db.codec import encode_trip
from tripsync.db.context import UserContext
from tripsync.db.repositories import TripStoreError
from tripsync.models import Trip

BASE_URL = "https://store.test/v1"


class FakeDocumentStore:
    """Minimal document store served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.documents: dict[str, dict[str, Any]] = {}
        self.requests: list[tuple[str, str]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requests.append((request.method, path))

        if request.method == "PUT":
            self.documents[path] = json.loads(request.content)
            return httpx.Response(200, json={"name": path})
        if request.method == "GET":
            prefix = path + "/"
            docs = [doc for key, doc in self.documents.items() if key.startswith(prefix)]
            return httpx.Response(200, json={"documents": docs})
        if request.method == "DELETE":
            if path not in self.documents:
                return httpx.Response(404, json={"error": "not found"})
            del self.documents[path]
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture
def store() -> FakeDocumentStore:
    return FakeDocumentStore()


@pytest.fixture
def repo(store: FakeDocumentStore) -> HttpTripRepository:
    client = httpx.Client(transport=httpx.MockTransport(store.handler))
    return HttpTripRepository(BASE_URL, client=client)


def test_save_puts_document_under_user_namespace(
    repo: HttpTripRepository, store: FakeDocumentStore, vietnam_trip: Trip, user_ctx: UserContext
) -> None:
    repo.save(vietnam_trip, user_ctx)

    assert store.requests == [("PUT", "/v1/users/user-a/trips/vietnam_trip_001")]
    assert store.documents["/v1/users/user-a/trips/vietnam_trip_001"]["title"] == (
        "Vietnam Adventure"
    )


def test_save_then_fetch_round_trips(
    repo: HttpTripRepository, vietnam_trip: Trip, user_ctx: UserContext
) -> None:
    repo.save(vietnam_trip, user_ctx)

    assert repo.fetch(user_ctx) == [vietnam_trip]


def test_user_isolation(repo: HttpTripRepository, vietnam_trip: Trip) -> None:
    repo.save(vietnam_trip, UserContext(user_id="user-a"))

    assert repo.fetch(UserContext(user_id="user-b")) == []


def test_fetch_skips_unreadable_documents(
    repo: HttpTripRepository, store: FakeDocumentStore, vietnam_trip: Trip, user_ctx: UserContext
) -> None:
    repo.save(vietnam_trip, user_ctx)
    store.documents["/v1/users/user-a/trips/broken"] = {"id": "broken"}

    assert [t.id for t in repo.fetch(user_ctx)] == ["vietnam_trip_001"]


def test_fetch_accepts_bare_list(vietnam_trip: Trip, user_ctx: UserContext) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[encode_trip(vietnam_trip)])

    repo = HttpTripRepository(BASE_URL, client=httpx.Client(transport=httpx.MockTransport(handler)))

    assert [t.id for t in repo.fetch(user_ctx)] == ["vietnam_trip_001"]


def test_delete(
    repo: HttpTripRepository, vietnam_trip: Trip, user_ctx: UserContext
) -> None:
    repo.save(vietnam_trip, user_ctx)

    assert repo.delete(vietnam_trip.id, user_ctx) is True
    assert repo.delete(vietnam_trip.id, user_ctx) is False
    assert repo.fetch(user_ctx) == []


@pytest.mark.parametrize("operation", ["save", "fetch", "delete"])
def test_server_errors_raise_store_error(
    operation: str, vietnam_trip: Trip, user_ctx: UserContext
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "unavailable"})

    repo = HttpTripRepository(BASE_URL, client=httpx.Client(transport=httpx.MockTransport(handler)))

    with pytest.raises(TripStoreError):
        if operation == "save":
            repo.save(vietnam_trip, user_ctx)
        elif operation == "fetch":
            repo.fetch(user_ctx)
        else:
            repo.delete(vietnam_trip.id, user_ctx)


def test_fetch_rejects_non_json_body(user_ctx: UserContext) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    repo = HttpTripRepository(BASE_URL, client=httpx.Client(transport=httpx.MockTransport(handler)))

    with pytest.raises(TripStoreError):
        repo.fetch(user_ctx)


def test_from_settings_uses_configured_collections() -> None:
    settings = Settings(
        remote_store_url="https://store.test/v2/",
        users_collection="accounts",
        trips_collection="itineraries",
    )

    repo = HttpTripRepository.from_settings(settings)

    assert repo._collection_url(UserContext(user_id="u1")) == (
        "https://store.test/v2/accounts/u1/itineraries"
    )
    repo.close()
