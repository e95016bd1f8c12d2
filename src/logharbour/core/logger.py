"""Context-carrying logger and its emission pipeline.

A ``Logger`` holds an immutable ``LoggerContext`` (application, system,
module, actor, operation, target, status, origin) and stamps it onto every
entry it emits. The ``with_*`` methods return a new Logger with one context
field changed; the parent is never touched, so a Logger can be specialized
per request or per unit of work and handed around freely.

Each emission runs under the Logger's lock:

1. the entry's application name is re-stamped from the context,
2. entries ranked below the threshold are dropped (``SUPPRESSED``),
3. the validator runs; a rejected entry goes to the fallback branch when the
   sink is a ``FallbackWriter`` (``FALLBACK``), otherwise the rejection is
   raised and nothing is written,
4. the entry is serialized and written (``WRITTEN``); sink errors propagate.

A Logger may be shared between threads, but the intended usage is one Logger
(or one derived clone) per thread or task.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from .config import LoggerConfig, resolve_logger_config
from .models import (
    ActivityInfo,
    ChangeInfo,
    DebugInfo,
    Entry,
    EventKind,
    Payload,
    Priority,
    Status,
)
from .runtime import caller_location, runtime_version, system_name
from .sinks import ByteSink, FallbackWriter, write_all
from .validation import Validator, accept_all

logger = logging.getLogger(__name__)


class EmitOutcome(str, Enum):
    """How a successful emission call was resolved."""

    WRITTEN = "written"  # validated and written to the sink
    SUPPRESSED = "suppressed"  # below the priority threshold
    FALLBACK = "fallback"  # rejected by the validator, written to the fallback branch


@dataclass(frozen=True, slots=True)
class LoggerContext:
    """Ambient fields stamped onto every entry a Logger produces."""

    app_name: str
    system: str
    module: str = ""
    who: str = ""
    op: str = ""
    what_class: str = ""
    what_instance_id: str = ""
    status: Status = Status.SUCCESS
    remote_ip: str = ""
    priority: Priority = Priority.INFO


class Logger:
    """Structured logger bound to a context snapshot, a validator and a sink."""

    def __init__(self, context: LoggerContext, sink: ByteSink, validator: Validator | None = None):
        self._context = context
        self._priority = context.priority
        self._sink = sink
        self._validator = validator if validator is not None else accept_all
        self._lock = threading.Lock()

    @property
    def context(self) -> LoggerContext:
        """Snapshot of the current context, including the live threshold."""
        return replace(self._context, priority=self._priority)

    @property
    def priority(self) -> Priority:
        return self._priority

    @property
    def sink(self) -> ByteSink:
        return self._sink

    @property
    def validator(self) -> Validator:
        return self._validator

    # --- context derivation -------------------------------------------------

    def _derive(self, **changes: Any) -> Logger:
        return Logger(replace(self.context, **changes), self._sink, self._validator)

    def with_who(self, who: str) -> Logger:
        """Return a new Logger whose entries name ``who`` as the actor."""
        return self._derive(who=who)

    def with_module(self, module: str) -> Logger:
        return self._derive(module=module)

    def with_op(self, op: str) -> Logger:
        return self._derive(op=op)

    def with_what_class(self, what_class: str) -> Logger:
        return self._derive(what_class=what_class)

    def with_what_instance_id(self, what_instance_id: str) -> Logger:
        return self._derive(what_instance_id=what_instance_id)

    def with_status(self, status: Status) -> Logger:
        return self._derive(status=status)

    def with_priority(self, priority: Priority) -> Logger:
        """Return a new Logger with its own threshold set to ``priority``."""
        return self._derive(priority=priority)

    def with_remote_ip(self, remote_ip: str) -> Logger:
        return self._derive(remote_ip=remote_ip)

    def change_priority(self, new_priority: Priority) -> None:
        """Change this Logger's threshold in place.

        Unlike the ``with_*`` methods this mutates the instance: every later
        emission through this Logger sees the new threshold. Loggers derived
        earlier keep the threshold they were created with.
        """
        with self._lock:
            self._priority = new_priority

    # --- emission -----------------------------------------------------------

    def _new_entry(
        self,
        kind: EventKind,
        message: str,
        data: Payload,
        priority: Priority | None,
    ) -> Entry:
        ctx = self._context
        return Entry(
            app_name=ctx.app_name,
            system=ctx.system,
            module=ctx.module,
            kind=kind,
            priority=self._priority if priority is None else priority,
            who=ctx.who,
            op=ctx.op,
            what_class=ctx.what_class,
            what_instance_id=ctx.what_instance_id,
            status=ctx.status,
            remote_ip=ctx.remote_ip,
            message=message,
            data=data,
        )

    def log_data_change(
        self,
        message: str,
        data: ChangeInfo,
        *,
        priority: Priority | None = None,
    ) -> EmitOutcome:
        """Log a data change event (create, update, delete)."""
        return self.log(self._new_entry(EventKind.CHANGE, message, data, priority))

    def log_activity(
        self,
        message: str,
        data: Any = None,
        *,
        priority: Priority | None = None,
    ) -> EmitOutcome:
        """Log an activity event such as a web service call.

        ``data`` may be any JSON-serializable value.
        """
        if not isinstance(data, ActivityInfo):
            data = ActivityInfo(data)
        return self.log(self._new_entry(EventKind.ACTIVITY, message, data, priority))

    def log_debug(
        self,
        message: str,
        data: DebugInfo | None = None,
        *,
        priority: Priority | None = None,
    ) -> EmitOutcome:
        """Log a debug event annotated with the caller's location and stack."""
        file_name, line_number, function_name, stack_trace = caller_location(1)
        data = (data or DebugInfo()).model_copy(
            update={
                "pid": os.getpid(),
                "runtime": runtime_version(),
                "file_name": file_name,
                "line_number": line_number,
                "function_name": function_name,
                "stack_trace": stack_trace,
            }
        )
        return self.log(self._new_entry(EventKind.DEBUG, message, data, priority))

    def log(self, entry: Entry) -> EmitOutcome:
        """Run an entry through the filter, validation and write steps.

        Entries built by the ``log_*`` methods take their default priority
        before the lock is acquired; a concurrent ``change_priority`` may
        therefore suppress an entry stamped with the previous threshold.
        """
        with self._lock:
            if entry.app_name != self._context.app_name:
                entry = entry.model_copy(update={"app_name": self._context.app_name})

            if entry.priority < self._priority:
                return EmitOutcome.SUPPRESSED

            try:
                self._validator.validate(entry)
            except ValueError as e:
                if not isinstance(self._sink, FallbackWriter):
                    raise
                logger.debug("Entry rejected by validator, writing to fallback: %s", e)
                self._sink.write_fallback(entry.to_json_line())
                return EmitOutcome.FALLBACK

            write_all(self._sink, entry.to_json_line())
            return EmitOutcome.WRITTEN


def new_logger(
    app_name: str,
    sink: ByteSink,
    *,
    validator: Validator | None = None,
    config: LoggerConfig | None = None,
    hostname: Callable[[], str] | None = None,
) -> Logger:
    """Create a Logger writing to ``sink``.

    Prefer ``new_logger_with_fallback``: with a plain sink, entries rejected
    by the validator are raised to the caller instead of being kept.
    """
    cfg = resolve_logger_config(config)
    context = LoggerContext(
        app_name=app_name,
        system=system_name(hostname),
        priority=cfg.priority,
    )
    return Logger(context, sink, validator)


def new_logger_with_fallback(
    app_name: str,
    writer: FallbackWriter,
    *,
    validator: Validator | None = None,
    config: LoggerConfig | None = None,
    hostname: Callable[[], str] | None = None,
) -> Logger:
    """Create a Logger over a FallbackWriter.

    The fallback branch receives entries when the primary sink fails and
    entries the validator rejects.
    """
    return new_logger(app_name, writer, validator=validator, config=config, hostname=hostname)
