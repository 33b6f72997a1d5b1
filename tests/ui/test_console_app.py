"""ConsoleApp command handling against the in-process API."""

from todai.client.api import TasksApi
from todai.domain.enums import TaskStatus
from todai.ui.console import HELP_TEXT, ConsoleApp
from tests.fakes import Answers, FakeTaskRepository


def _app(tasks_api: TasksApi, *answers: str) -> tuple[ConsoleApp, list[str]]:
    printed: list[str] = []
    app = ConsoleApp(tasks_api, input_fn=Answers(*answers), emit=printed.append, width=80)
    return app, printed


async def test_help_and_quit(tasks_api: TasksApi) -> None:
    app, printed = _app(tasks_api)
    assert await app.handle("help") is True
    assert printed == [HELP_TEXT]
    assert await app.handle("quit") is False


async def test_add_edit_status_delete_flow(tasks_api: TasksApi, fake_repo: FakeTaskRepository) -> None:
    # add: title, description, status, priority, due date
    # edit #1: keep title, new description, keep rest
    # delete #1: confirm
    app, printed = _app(
        tasks_api,
        "Buy milk", "", "", "2", "",
        "", "2 litres", "", "", "",
        "y",
    )
    await app.task_list.load()

    await app.handle("add")
    [task] = fake_repo.tasks.values()
    assert task.title == "Buy milk"
    assert task.priority == 2
    assert any("Task created" in line for line in printed)

    await app.handle("edit 1")
    assert fake_repo.tasks[task.id].description == "2 litres"

    await app.handle("status 1 done")
    assert fake_repo.tasks[task.id].status is TaskStatus.DONE
    assert app.task_list.item_at(1).status is TaskStatus.DONE

    await app.handle("delete 1")
    assert fake_repo.tasks == {}
    assert any("Task deleted" in line for line in printed)
    assert "No tasks yet" in printed[-2]


async def test_add_reprompts_until_valid(tasks_api: TasksApi, fake_repo: FakeTaskRepository) -> None:
    app, printed = _app(
        tasks_api,
        "", "", "", "15", "",
        "Fixed", "", "", "9", "",
    )
    await app.handle("add")
    assert any("Title is required" in line for line in printed)
    assert any("Priority must be between 1 and 9" in line for line in printed)
    [task] = fake_repo.tasks.values()
    assert task.title == "Fixed"
    assert task.priority == 9


async def test_add_cancelled_by_eof(tasks_api: TasksApi, fake_repo: FakeTaskRepository) -> None:
    app, printed = _app(tasks_api, "Half")
    await app.handle("add")
    assert fake_repo.tasks == {}
    assert "[info] Cancelled" in printed


async def test_bad_arguments_warn(tasks_api: TasksApi) -> None:
    app, printed = _app(tasks_api)
    await app.task_list.load()
    await app.handle("edit x")
    assert "[warn] Not a task number: x" in printed
    await app.handle("delete 4")
    assert "[warn] No task #4" in printed
    await app.handle("frobnicate")
    assert "[warn] Unknown command: frobnicate (try: help)" in printed


async def test_invalid_status_argument(tasks_api: TasksApi) -> None:
    await tasks_api.create_task({"title": "t"})
    app, printed = _app(tasks_api)
    await app.task_list.load()
    await app.handle("status 1 archived")
    assert "[warn] Status must be one of: todo, in-progress, done" in printed


async def test_run_loads_and_exits_on_eof(tasks_api: TasksApi) -> None:
    app, printed = _app(tasks_api, "list")
    await app.run()
    assert printed[0] == "todAI - Your Intelligent Task Manager"
    assert sum("No tasks yet" in line for line in printed) == 2
