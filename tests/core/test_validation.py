from __future__ import annotations

import pytest
from pydantic import BaseModel, Field

from logharbour.core.errors import EntryValidationError
from logharbour.core.models import Entry, EventKind
from logharbour.core.validation import (
    AcceptAll,
    ModelValidator,
    Validator,
    ValidatorFunc,
    accept_all,
)


def _entry(**kw) -> Entry:
    return Entry(app_name="app", kind=EventKind.ACTIVITY, **kw)


def test_accept_all_accepts() -> None:
    assert isinstance(accept_all, Validator)
    assert AcceptAll().validate(_entry()) is None


def test_validator_func_returns_description() -> None:
    v = ValidatorFunc(lambda e: None if e.who else "who is required")

    v.validate(_entry(who="alice"))
    with pytest.raises(EntryValidationError, match="who is required"):
        v.validate(_entry())


class _AuditFields(BaseModel):
    who: str = Field(min_length=1)
    op: str = Field(min_length=1)


def test_model_validator_converts_pydantic_errors() -> None:
    v = ModelValidator(_AuditFields)

    v.validate(_entry(who="alice", op="login"))
    with pytest.raises(EntryValidationError, match="_AuditFields") as excinfo:
        v.validate(_entry(who="alice"))
    assert excinfo.value.__cause__ is not None
