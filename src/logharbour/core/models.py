"""Core data models for log entries.

An ``Entry`` is the unit of emission. It is immutable and serializes to one
JSON object per line, with ``Priority`` and ``Type`` rendered as their
canonical names rather than their integer ranks.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import IntEnum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    ValidationInfo,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel, to_pascal

from .errors import EntrySerializationError

UNKNOWN = "Unknown"


class Priority(IntEnum):
    """Severity rank of an entry, from most verbose to most severe."""

    DEBUG2 = 1  # extremely verbose debugging information
    DEBUG1 = 2
    DEBUG0 = 3  # high-level debugging information
    INFO = 4
    WARN = 5
    ERR = 6  # an operation failed to complete
    CRIT = 7
    SEC = 8  # security alert

    @property
    def label(self) -> str:
        return _PRIORITY_LABELS[self]

    @classmethod
    def name_of(cls, value: int) -> str:
        """Canonical name for a rank; ``"Unknown"`` when unrecognized."""
        return _PRIORITY_LABELS.get(value, UNKNOWN)

    @classmethod
    def parse(cls, text: str) -> Priority:
        """Parse a canonical priority name (case-insensitive)."""
        wanted = text.strip().lower()
        for p, label in _PRIORITY_LABELS.items():
            if label.lower() == wanted:
                return p
        valid = ", ".join(_PRIORITY_LABELS.values())
        raise ValueError(f"Unknown priority '{text}'. Valid values: {valid}.")

    def __str__(self) -> str:
        return self.label


_PRIORITY_LABELS: dict[int, str] = {
    Priority.DEBUG2: "Debug2",
    Priority.DEBUG1: "Debug1",
    Priority.DEBUG0: "Debug0",
    Priority.INFO: "Info",
    Priority.WARN: "Warn",
    Priority.ERR: "Err",
    Priority.CRIT: "Crit",
    Priority.SEC: "Sec",
}

DEFAULT_PRIORITY = Priority.INFO


class EventKind(IntEnum):
    """Category of an entry; selects the payload shape."""

    CHANGE = 1  # data creations, updates, deletions
    ACTIVITY = 2  # web service calls, function executions
    DEBUG = 3

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]

    @classmethod
    def name_of(cls, value: int) -> str:
        return _KIND_LABELS.get(value, UNKNOWN)

    def __str__(self) -> str:
        return self.label


_KIND_LABELS: dict[int, str] = {
    EventKind.CHANGE: "Change",
    EventKind.ACTIVITY: "Activity",
    EventKind.DEBUG: "Debug",
}


class Status(IntEnum):
    """Binary outcome of the logged operation."""

    SUCCESS = 0
    FAILURE = 1


class ChangeInfo(BaseModel):
    """A data change: which entity, what operation, and the new field values."""

    model_config = ConfigDict(frozen=True)

    entity: str = ""
    operation: str = ""
    changes: dict[str, Any] = Field(default_factory=dict)


class ActivityInfo(RootModel[Any]):
    """Caller-defined activity payload (web service call, job run, ...)."""

    model_config = ConfigDict(frozen=True)

    root: Any = None


class DebugInfo(BaseModel):
    """Diagnostic payload.

    Everything except ``variables`` is filled in by the logger from the
    calling frame; values supplied by the caller for those fields are
    overwritten.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    pid: int = 0
    runtime: str = ""
    file_name: str = ""
    line_number: int = 0
    function_name: str = ""
    stack_trace: str = ""
    variables: dict[str, Any] = Field(default_factory=dict)


Payload = DebugInfo | ChangeInfo | ActivityInfo | None

_PAYLOAD_MODELS: dict[EventKind, type[BaseModel]] = {
    EventKind.CHANGE: ChangeInfo,
    EventKind.ACTIVITY: ActivityInfo,
    EventKind.DEBUG: DebugInfo,
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Entry(BaseModel):
    """One immutable log event, ready for serialization."""

    model_config = ConfigDict(frozen=True, alias_generator=to_pascal, populate_by_name=True)

    app_name: str
    system: str = ""
    module: str = ""
    kind: EventKind = Field(alias="Type")
    priority: Priority = DEFAULT_PRIORITY
    when: datetime = Field(default_factory=_utcnow)
    who: str = ""
    op: str = ""
    what_class: str = ""
    what_instance_id: str = ""
    status: Status = Status.SUCCESS
    remote_ip: str = Field(default="", alias="RemoteIP")
    message: str = ""
    data: Payload = Field(default=None, union_mode="left_to_right")

    @field_validator("data", mode="before")
    @classmethod
    def _payload_for_kind(cls, value: Any, info: ValidationInfo) -> Any:
        kind = info.data.get("kind")
        model = _PAYLOAD_MODELS.get(kind)
        if value is None or model is None or isinstance(value, model):
            return value
        if kind is EventKind.ACTIVITY:
            return ActivityInfo(value)
        return model.model_validate(value)

    @field_serializer("kind", "priority")
    def _canonical_name(self, value: int) -> str:
        if isinstance(value, EventKind):
            return EventKind.name_of(value)
        return Priority.name_of(value)

    def to_json_line(self) -> bytes:
        """Encode as a newline-terminated UTF-8 JSON object."""
        try:
            text = self.model_dump_json(by_alias=True)
        except ValueError as exc:
            raise EntrySerializationError(f"cannot serialize log entry: {exc}") from exc
        return (text + "\n").encode("utf-8")
