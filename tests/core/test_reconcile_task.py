"""Task Reconciliation — tests for pure full/partial merge logic.

Tests cover:
    - parse_status is case-insensitive and rejects unknown values
    - reconcile_full requires title, description, status (non-blank)
    - reconcile_full replaces user_id wholesale, including with None
    - reconcile_partial skips None/blank fields and never clears user_id
    - reconcile_partial with an empty payload is the identity
    - reconcile functions never mutate their input
"""

from dataclasses import dataclass

import pytest

from app.core.domain_types import TaskStatus, UserId
from app.core.errors import InvalidStatusError, InvalidTaskDataError
from app.core.reconcile_task import (
    TaskState,
    parse_status,
    reconcile_full,
    reconcile_partial,
)


@dataclass
class Payload:
    title: str | None = None
    description: str | None = None
    status: str | None = None
    user_id: int | None = None


def _state(**overrides) -> TaskState:
    base = {
        "title": "Old title",
        "description": "Old description",
        "status": TaskStatus.NEW,
        "user_id": UserId(1),
    }
    base.update(overrides)
    return TaskState(**base)


# ─── parse_status ────────────────────────────────────────────────

@pytest.mark.parametrize("raw", ["NEW", "new", "New", "nEw"])
def test_parse_status_is_case_insensitive(raw):
    assert parse_status(raw) is TaskStatus.NEW


def test_parse_status_accepts_every_member():
    for member in TaskStatus:
        assert parse_status(member.value.lower()) is member


def test_parse_status_rejects_unknown_value():
    assert parse_status("bogus") is None


def test_parse_status_rejects_spaced_name():
    assert parse_status("in progress") is None


# ─── reconcile_full ──────────────────────────────────────────────

def test_reconcile_full_replaces_every_field():
    result = reconcile_full(
        _state(),
        Payload(title="T", description="D", status="completed", user_id=7),
    )
    assert result == TaskState(
        title="T", description="D", status=TaskStatus.COMPLETED, user_id=7,
    )


def test_reconcile_full_clears_user_id_when_payload_has_none():
    result = reconcile_full(
        _state(user_id=UserId(3)),
        Payload(title="T", description="D", status="NEW"),
    )
    assert result.user_id is None


@pytest.mark.parametrize("field", ["title", "description", "status"])
@pytest.mark.parametrize("value", [None, "", "   "])
def test_reconcile_full_rejects_missing_required_field(field, value):
    payload = Payload(title="T", description="D", status="NEW")
    setattr(payload, field, value)
    with pytest.raises(InvalidTaskDataError) as exc_info:
        reconcile_full(_state(), payload)
    assert exc_info.value.field == field
    assert exc_info.value.http_status == 400


def test_reconcile_full_reports_title_before_description():
    with pytest.raises(InvalidTaskDataError) as exc_info:
        reconcile_full(_state(), Payload(title="", description="", status=""))
    assert exc_info.value.message == "Title cannot be empty"


def test_reconcile_full_rejects_unknown_status():
    with pytest.raises(InvalidStatusError) as exc_info:
        reconcile_full(
            _state(), Payload(title="T", description="D", status="done"),
        )
    assert "done" in exc_info.value.message
    assert exc_info.value.code == "INVALID_STATUS"


def test_reconcile_full_does_not_mutate_existing():
    existing = _state()
    reconcile_full(
        existing, Payload(title="T", description="D", status="CANCELLED"),
    )
    assert existing == _state()


# ─── reconcile_partial ───────────────────────────────────────────

def test_reconcile_partial_empty_payload_is_identity():
    existing = _state()
    assert reconcile_partial(existing, Payload()) == existing


def test_reconcile_partial_updates_only_supplied_fields():
    result = reconcile_partial(_state(), Payload(title="New title"))
    assert result.title == "New title"
    assert result.description == "Old description"
    assert result.status is TaskStatus.NEW
    assert result.user_id == 1


@pytest.mark.parametrize("blank", ["", "  ", "\t"])
def test_reconcile_partial_ignores_blank_text(blank):
    result = reconcile_partial(
        _state(), Payload(title=blank, description=blank, status=blank),
    )
    assert result == _state()


def test_reconcile_partial_parses_status_case_insensitively():
    result = reconcile_partial(_state(), Payload(status="in_progress"))
    assert result.status is TaskStatus.IN_PROGRESS


def test_reconcile_partial_rejects_unknown_status():
    with pytest.raises(InvalidStatusError):
        reconcile_partial(_state(), Payload(title="T", status="bogus"))


def test_reconcile_partial_never_clears_user_id():
    result = reconcile_partial(_state(user_id=UserId(4)), Payload(title="T"))
    assert result.user_id == 4


def test_reconcile_partial_reassigns_user_id():
    result = reconcile_partial(_state(user_id=UserId(4)), Payload(user_id=9))
    assert result.user_id == 9


def test_any_status_can_move_to_any_other():
    for source in TaskStatus:
        for target in TaskStatus:
            result = reconcile_partial(
                _state(status=source), Payload(status=target.value),
            )
            assert result.status is target
