"""Pytest configuration and fixtures for todai.

HTTP tests run the FastAPI app in-process over httpx.ASGITransport with
the task repository replaced by tests.fakes.FakeTaskRepository, so no
datastore is needed. Datastore env vars are cleared before the app is
built so a developer's .env cannot point tests at a real project.
"""

import os

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

for _var in (
    "FIREBASE_SERVICE_ACCOUNT_KEY",
    "FIREBASE_SERVICE_ACCOUNT_PATH",
    "FIRESTORE_EMULATOR_HOST",
):
    os.environ.pop(_var, None)
os.environ["DEBUG"] = "false"

from todai.api.dependencies import get_task_repo  # noqa: E402
from todai.client.api import TasksApi  # noqa: E402
from todai.core.config import get_settings  # noqa: E402
from todai.infrastructure.firebase._rest_client import FirestoreRESTClient  # noqa: E402
from todai.main import create_app  # noqa: E402
from todai.ui.confirm import ConfirmDialog  # noqa: E402
from todai.ui.notifications import Notifier  # noqa: E402
from tests.fakes import Answers, FakeFirestore, FakeTaskRepository  # noqa: E402


@pytest.fixture
def fake_repo() -> FakeTaskRepository:
    return FakeTaskRepository()


@pytest.fixture
def app(fake_repo: FakeTaskRepository):
    """Fresh app per test with the in-memory repository injected."""
    get_settings.cache_clear()
    application = create_app()
    application.dependency_overrides[get_task_repo] = lambda: fake_repo
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def tasks_api(app) -> TasksApi:
    """TasksApi wired to the in-process app, for client and UI tests."""
    http = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    api = TasksApi("http://test/api", http_client=http)
    yield api
    await http.aclose()


@pytest.fixture
def fake_firestore() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
async def firestore_client(fake_firestore: FakeFirestore) -> FirestoreRESTClient:
    """FirestoreRESTClient in emulator mode talking to FakeFirestore."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_firestore.handler))
    client = FirestoreRESTClient(
        "test-project",
        None,
        base_url="http://firestore.test/v1",
        http_client=http,
    )
    yield client
    await client.aclose()
    await http.aclose()


@pytest.fixture
def printed() -> list[str]:
    """Lines written by UI components."""
    return []


@pytest.fixture
def notifier(printed: list[str]) -> Notifier:
    return Notifier(emit=printed.append)


@pytest.fixture
def answers() -> Answers:
    return Answers()


@pytest.fixture
def confirm(answers: Answers, printed: list[str]) -> ConfirmDialog:
    return ConfirmDialog(input_fn=answers, emit=printed.append)
