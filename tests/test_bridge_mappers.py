import logging
from datetime import UTC, datetime

import pytest

from taskdesk.domain.exceptions import DateTimeDecodeError, PayloadValidationError
from taskdesk.domain.models import Dashboard, Task, TaskPage
from taskdesk.infrastructure.bridge.mappers import BridgeMapper
from taskdesk.infrastructure.bridge.outputs import (
    CreateTaskOutput,
    GetDashboardOutput,
    GetTaskOutput,
    ListTasksOutput,
)


@pytest.fixture
def mapper(codec) -> BridgeMapper:
    return BridgeMapper(codec)


def test_to_found_task_maps_wire_names_and_dates(mapper: BridgeMapper, make_wire_task) -> None:
    output = GetTaskOutput.create_from(
        {"task": make_wire_task("t1", DueDate="2024-01-03T18:00:00Z", Priority="medium")}
    )

    task = mapper.to_found_task(output)

    assert task == Task(
        id="t1",
        title="Write spec",
        status="active",
        priority="medium",
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        due_date=datetime(2024, 1, 3, 18, tzinfo=UTC),
    )


def test_null_task_maps_to_none(mapper: BridgeMapper) -> None:
    assert mapper.to_found_task(GetTaskOutput.create_from({"task": None})) is None


def test_empty_priority_maps_to_none(mapper: BridgeMapper, make_wire_task) -> None:
    task = mapper.to_task(GetTaskOutput.create_from({"task": make_wire_task(Priority="")}).task)

    assert task.priority is None


def test_surface_task_is_immutable(mapper: BridgeMapper, make_wire_task) -> None:
    task = mapper.to_found_task(GetTaskOutput.create_from({"task": make_wire_task()}))

    with pytest.raises(ValueError):
        task.id = "other"


def test_task_missing_title_is_rejected(mapper: BridgeMapper) -> None:
    output = GetTaskOutput.create_from({"task": {"ID": "t1", "CreatedAt": "2024-01-01T00:00:00Z"}})

    with pytest.raises(PayloadValidationError) as exc_info:
        mapper.to_found_task(output)

    assert exc_info.value.shape == "Task"


def test_bad_date_propagates_decode_error(mapper: BridgeMapper, make_wire_task) -> None:
    output = GetTaskOutput.create_from({"task": make_wire_task(CreatedAt="soon")})

    with pytest.raises(DateTimeDecodeError):
        mapper.to_found_task(output)


def test_primitive_in_task_list_is_rejected(mapper: BridgeMapper) -> None:
    output = ListTasksOutput.create_from({"tasks": ["t1"], "total": 1})

    with pytest.raises(PayloadValidationError):
        mapper.to_task_page(output)


def test_task_page_keeps_backend_total(mapper: BridgeMapper, make_wire_task) -> None:
    output = ListTasksOutput.create_from({"tasks": [make_wire_task("a"), make_wire_task("b")], "total": 40})

    page = mapper.to_task_page(output)

    assert isinstance(page, TaskPage)
    assert [task.id for task in page.tasks] == ["a", "b"]
    assert page.total == 40


def test_task_page_from_null_list(mapper: BridgeMapper) -> None:
    page = mapper.to_task_page(ListTasksOutput.create_from({"tasks": None, "total": 0}))

    assert page.tasks == []
    assert page.total == 0


def test_null_list_entries_are_dropped_and_logged(mapper: BridgeMapper, make_wire_task, caplog) -> None:
    output = ListTasksOutput.create_from({"tasks": [make_wire_task("a"), None], "total": 2})

    with caplog.at_level(logging.DEBUG, logger="taskdesk.infrastructure.bridge.mappers"):
        page = mapper.to_task_page(output)

    assert [task.id for task in page.tasks] == ["a"]
    assert page.total == 2
    assert "Null entries dropped from task list" in caplog.text
    assert [record.dropped for record in caplog.records if hasattr(record, "dropped")] == [1]


def test_task_page_without_total_counts_tasks(mapper: BridgeMapper, make_wire_task) -> None:
    page = mapper.to_task_page(ListTasksOutput.create_from({"tasks": [make_wire_task()]}))

    assert page.total == 1


def test_dashboard_mapping(mapper: BridgeMapper, make_wire_task) -> None:
    output = GetDashboardOutput.create_from(
        {
            "active_count": 2,
            "completed_count": 7,
            "overdue_count": 1,
            "due_today": [make_wire_task("a")],
            "due_this_week": None,
            "recent_tasks": [make_wire_task("a"), make_wire_task("b")],
        }
    )

    dashboard = mapper.to_dashboard(output)

    assert isinstance(dashboard, Dashboard)
    assert dashboard.active_count == 2
    assert dashboard.completed_count == 7
    assert dashboard.overdue_count == 1
    assert [task.id for task in dashboard.due_today] == ["a"]
    assert dashboard.due_this_week == []
    assert [task.id for task in dashboard.recent_tasks] == ["a", "b"]


def test_dashboard_rejects_negative_counts(mapper: BridgeMapper) -> None:
    output = GetDashboardOutput.create_from({"active_count": -1, "completed_count": 0, "overdue_count": 0})

    with pytest.raises(PayloadValidationError) as exc_info:
        mapper.to_dashboard(output)

    assert exc_info.value.shape == "Dashboard"


def test_created_id(mapper: BridgeMapper) -> None:
    assert mapper.to_created_id(CreateTaskOutput.create_from({"id": "task_1"})) == "task_1"


def test_created_id_missing_is_rejected(mapper: BridgeMapper) -> None:
    with pytest.raises(PayloadValidationError):
        mapper.to_created_id(CreateTaskOutput.create_from({}))


def test_mapper_resolves_codec_from_di(stubbed_inject, codec) -> None:
    mapper = BridgeMapper()

    assert mapper._codec is codec
