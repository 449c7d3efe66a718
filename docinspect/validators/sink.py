"""Result sinks: receive the header signal, each finding, and the footer signal.

Rendering (plain text, JSON, XML) belongs to the sink, not the engine. The
engine brackets a run with flush_header()/flush_footer() so a streaming sink
can write findings as they arrive without buffering.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

import structlog

from docinspect.validators.models import ValidationError

logger = structlog.get_logger()

ErrorListener = Callable[[ValidationError], None]


class ResultSink(ABC):
    """Abstract base for finding consumers."""

    @abstractmethod
    def flush_header(self) -> None:
        ...

    @abstractmethod
    def flush_error(self, error: ValidationError) -> None:
        ...

    @abstractmethod
    def flush_footer(self) -> None:
        ...


class NullSink(ResultSink):
    """Discards everything; the caller consumes the returned findings instead."""

    def flush_header(self) -> None:
        pass

    def flush_error(self, error: ValidationError) -> None:
        pass

    def flush_footer(self) -> None:
        pass


class CallbackSink(ResultSink):
    """Bridges the engine to plain callables (loggers, queues, writers)."""

    def __init__(
        self,
        on_error: ErrorListener,
        on_header: Optional[Callable[[], None]] = None,
        on_footer: Optional[Callable[[], None]] = None,
    ):
        self._on_error = on_error
        self._on_header = on_header
        self._on_footer = on_footer

    def flush_header(self) -> None:
        if self._on_header:
            self._on_header()

    def flush_error(self, error: ValidationError) -> None:
        self._on_error(error)

    def flush_footer(self) -> None:
        if self._on_footer:
            self._on_footer()


class CollectingSink(ResultSink):
    """Buffers findings in memory and counts header/footer signals."""

    def __init__(self):
        self.errors: list[ValidationError] = []
        self.headers = 0
        self.footers = 0

    def flush_header(self) -> None:
        self.headers += 1

    def flush_error(self, error: ValidationError) -> None:
        self.errors.append(error)

    def flush_footer(self) -> None:
        self.footers += 1
        logger.debug("sink_footer", findings=len(self.errors))
