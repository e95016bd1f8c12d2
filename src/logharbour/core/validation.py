"""Pluggable entry validation.

A validator inspects an entry before it reaches the primary sink and raises
``ValueError`` (normally ``EntryValidationError``) to reject it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ValidationError

from .errors import EntryValidationError
from .models import Entry


@runtime_checkable
class Validator(Protocol):
    """Validator interface: return None to accept, raise to reject."""

    def validate(self, entry: Entry) -> None:
        """Check an entry; raise ``ValueError`` if it must not be written."""
        ...


class AcceptAll:
    """Permissive validator that accepts every entry."""

    def validate(self, entry: Entry) -> None:
        return None


accept_all = AcceptAll()


@dataclass(frozen=True, slots=True)
class ValidatorFunc:
    """Adapt a plain function into a Validator.

    The function returns an error description to reject the entry, or
    ``None`` (or an empty string) to accept it.
    """

    fn: Callable[[Entry], str | None]

    def validate(self, entry: Entry) -> None:
        problem = self.fn(entry)
        if problem:
            raise EntryValidationError(problem)


@dataclass(frozen=True, slots=True)
class ModelValidator:
    """Validate entry fields against an application-supplied pydantic model.

    The schema sees the entry as a dict keyed by field name (``app_name``,
    ``who``, ``remote_ip``, ...), so constraints are declared with ordinary
    pydantic ``Field`` arguments. Unknown schema keys are the schema's concern.
    """

    schema: type[BaseModel]

    def validate(self, entry: Entry) -> None:
        try:
            self.schema.model_validate(dict(entry))
        except ValidationError as e:
            raise EntryValidationError(
                f"log entry failed {self.schema.__name__} validation: {e}"
            ) from e
