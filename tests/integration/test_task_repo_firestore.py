"""FirestoreTaskRepository against a fake Firestore REST backend (httpx.MockTransport)."""

from datetime import datetime, timedelta, timezone

import pytest

from todai.application.dtos.task import TaskCreate
from todai.domain.enums import TaskStatus
from todai.infrastructure.exceptions import StorageException, StoreNotConfiguredException
from todai.infrastructure.firebase.repositories import FirestoreTaskRepository
from todai.infrastructure.firebase.repositories import task_repo_firestore
from tests.fakes import FakeFirestore

JAN_22_2026 = 1_769_040_000
YEAR_ONE = -62_135_596_800  # 0001-01-01T00:00:00Z


@pytest.fixture
def ticking_clock(monkeypatch):
    """Make utc_now() advance one second per call so ordering is deterministic."""
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    calls = {"n": 0}

    def fake_now() -> datetime:
        calls["n"] += 1
        return start + timedelta(seconds=calls["n"])

    monkeypatch.setattr(task_repo_firestore, "utc_now", fake_now)


@pytest.fixture
def repo(firestore_client) -> FirestoreTaskRepository:
    return FirestoreTaskRepository(firestore_client)


async def test_insert_and_find(repo: FirestoreTaskRepository, fake_firestore: FakeFirestore) -> None:
    """Insert writes a document under a new id; find_by_id reads it back."""
    created = await repo.insert(
        TaskCreate(title="Call Bob", description="re: invoice", priority=2, due_date=JAN_22_2026)
    )
    assert created.id
    assert created.created_at == created.updated_at

    stored = fake_firestore.docs[f"{fake_firestore.prefix}/tasks/{created.id}"]
    assert stored["title"] == {"stringValue": "Call Bob"}
    assert stored["status"] == {"stringValue": "todo"}
    assert stored["due_date"] == {"timestampValue": "2026-01-22T00:00:00.000000Z"}

    found = await repo.find_by_id(created.id)
    assert found == created


async def test_insert_omits_unset_optional_fields(
    repo: FirestoreTaskRepository, fake_firestore: FakeFirestore
) -> None:
    created = await repo.insert(TaskCreate(title="Plain"))
    stored = fake_firestore.docs[f"{fake_firestore.prefix}/tasks/{created.id}"]
    assert "priority" not in stored
    assert "due_date" not in stored


async def test_emulator_requests_use_owner_token(
    repo: FirestoreTaskRepository, fake_firestore: FakeFirestore
) -> None:
    await repo.find_by_id("nope")
    assert fake_firestore.requests[-1].headers["Authorization"] == "Bearer owner"


async def test_find_unknown_returns_none(repo: FirestoreTaskRepository) -> None:
    assert await repo.find_by_id("missing") is None


async def test_list_all_newest_first(repo: FirestoreTaskRepository, ticking_clock) -> None:
    """Order comes from runQuery on created_at DESCENDING, not from update time."""
    first = await repo.insert(TaskCreate(title="first"))
    second = await repo.insert(TaskCreate(title="second"))
    await repo.update_by_id(first.id, {"title": "first, edited"})

    tasks = await repo.list_all()
    assert [t.id for t in tasks] == [second.id, first.id]
    assert tasks[1].title == "first, edited"


async def test_list_all_empty(repo: FirestoreTaskRepository) -> None:
    assert await repo.list_all() == []


async def test_update_sets_fields_and_refreshes_updated_at(
    repo: FirestoreTaskRepository, fake_firestore: FakeFirestore, ticking_clock
) -> None:
    created = await repo.insert(TaskCreate(title="t", priority=4))
    updated = await repo.update_by_id(created.id, {"status": TaskStatus.DONE})
    assert updated is not None
    assert updated.status is TaskStatus.DONE
    assert updated.priority == 4
    assert updated.updated_at > created.updated_at

    request = fake_firestore.requests[-1]
    assert request.method == "PATCH"
    assert request.url.params["currentDocument.exists"] == "true"
    assert sorted(request.url.params.get_list("updateMask.fieldPaths")) == ["status", "updated_at"]


async def test_update_none_removes_field(repo: FirestoreTaskRepository, fake_firestore: FakeFirestore) -> None:
    """Clearing puts the field in the update mask without a value."""
    created = await repo.insert(TaskCreate(title="t", priority=4, due_date=JAN_22_2026))
    updated = await repo.update_by_id(created.id, {"priority": None})
    assert updated is not None
    assert updated.priority is None
    assert updated.due_date == JAN_22_2026
    assert "priority" not in fake_firestore.docs[f"{fake_firestore.prefix}/tasks/{created.id}"]


async def test_update_unknown_returns_none_without_creating(
    repo: FirestoreTaskRepository, fake_firestore: FakeFirestore
) -> None:
    assert await repo.update_by_id("missing", {"title": "x"}) is None
    assert fake_firestore.docs == {}


async def test_delete(repo: FirestoreTaskRepository) -> None:
    created = await repo.insert(TaskCreate(title="t"))
    assert await repo.delete_by_id(created.id) is True
    assert await repo.find_by_id(created.id) is None
    assert await repo.delete_by_id(created.id) is False


async def test_id_with_url_delimiters_addresses_no_other_task(
    repo: FirestoreTaskRepository, fake_firestore: FakeFirestore
) -> None:
    """"?" and "#" in an id are sent escaped, so they never cut the id short."""
    created = await repo.insert(TaskCreate(title="real"))

    assert await repo.find_by_id(created.id + "?junk") is None
    assert b"%3Fjunk" in fake_firestore.requests[-1].url.raw_path
    assert await repo.update_by_id(created.id + "?x", {"title": "hijacked"}) is None
    assert await repo.delete_by_id(created.id + "#frag") is False

    found = await repo.find_by_id(created.id)
    assert found is not None
    assert found.title == "real"


@pytest.mark.parametrize("task_id", ["", ".", "..", "a/b"])
async def test_unaddressable_id_is_not_found_without_a_request(
    repo: FirestoreTaskRepository, fake_firestore: FakeFirestore, task_id: str
) -> None:
    assert await repo.find_by_id(task_id) is None
    assert await repo.update_by_id(task_id, {"title": "x"}) is None
    assert await repo.delete_by_id(task_id) is False
    assert fake_firestore.requests == []


async def test_early_year_due_date_round_trip(
    repo: FirestoreTaskRepository, fake_firestore: FakeFirestore
) -> None:
    created = await repo.insert(TaskCreate(title="t", due_date=YEAR_ONE))
    stored = fake_firestore.docs[f"{fake_firestore.prefix}/tasks/{created.id}"]
    assert stored["due_date"] == {"timestampValue": "0001-01-01T00:00:00.000000Z"}

    found = await repo.find_by_id(created.id)
    assert found is not None
    assert found.due_date == YEAR_ONE


async def test_backend_error_becomes_storage_exception(
    repo: FirestoreTaskRepository, fake_firestore: FakeFirestore
) -> None:
    fake_firestore.fail_status = 503
    with pytest.raises(StorageException) as exc_info:
        await repo.list_all()
    assert exc_info.value.message == "Server error while fetching tasks"


async def test_without_client_raises_store_not_configured() -> None:
    repo = FirestoreTaskRepository(None)
    with pytest.raises(StoreNotConfiguredException):
        await repo.list_all()
    with pytest.raises(StoreNotConfiguredException):
        await repo.insert(TaskCreate(title="t"))
