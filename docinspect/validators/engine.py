"""Validation Engine: walks the document tree once and aggregates findings.

Traversal order (stable, callers may rely on it for reproducible output):
    1. document-scope validators, in configuration order
    2. every section depth-first in document order:
         section-scope validators
         then for each paragraph: each sentence-scope validator over
         each sentence
         then the nested sections

Usage:
    engine = ValidationEngine.from_configuration(root_config)
    errors = engine.run(document)
"""

import threading
import time
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional

import structlog

from docinspect.config import get_settings
from docinspect.exceptions import ValidationCancelledError
from docinspect.models.configuration import ConfigurationNode, SharedResources
from docinspect.models.document import Document, Paragraph, Section
from docinspect.validators.base import BaseValidator
from docinspect.validators.models import ValidationError
from docinspect.validators.registry import ValidatorRegistry, ValidatorSet, default_registry
from docinspect.validators.sink import NullSink, ResultSink

logger = structlog.get_logger()


class _Run:
    """Per-run bookkeeping; one instance per traversal, never shared."""

    def __init__(self, sink: ResultSink, cancel_event: Optional[threading.Event]):
        self.sink = sink
        self.cancel_event = cancel_event
        self.errors: list[ValidationError] = []
        self.timings: dict[str, float] = defaultdict(float)
        self.faults = 0

    def check_cancelled(self) -> None:
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise ValidationCancelledError("validation cancelled")


class ValidationEngine:
    """Runs a ValidatorSet over documents and streams findings to a sink.

    Design principles:
        - Deterministic: same document + configuration → same ordered output
        - Fault-tolerant: a validator crashing on one target is logged and skipped
        - Sequential per run; parallelism only across documents, via clones
    """

    def __init__(self, validator_set: ValidatorSet, sink: Optional[ResultSink] = None):
        self.validator_set = validator_set
        self.sink = sink or NullSink()

    @classmethod
    def from_configuration(
        cls,
        root: ConfigurationNode,
        resources: Optional[SharedResources] = None,
        registry: Optional[ValidatorRegistry] = None,
        sink: Optional[ResultSink] = None,
    ) -> "ValidationEngine":
        """Load validators from a configuration tree and wrap them in an engine.

        Args:
            root: Configuration root whose children name the validators
            resources: Shared resources handed to every factory
            registry: Registry to resolve names in; defaults to default_registry
            sink: Receiver for streamed findings; defaults to NullSink

        Raises:
            ConfigurationError: if any configured validator cannot be built
        """
        validator_set = (registry or default_registry).load(root, resources)
        return cls(validator_set, sink)

    # ── Public API ──

    def run(
        self,
        document: Document,
        cancel_event: Optional[threading.Event] = None,
    ) -> list[ValidationError]:
        """Validate one document.

        Args:
            document: The parsed document to inspect
            cancel_event: Optional event; once set, the run stops at the next
                section or sentence boundary

        Returns:
            All findings, document-scope first, then in document order

        Raises:
            ValidationCancelledError: if cancel_event was set during the run
        """
        return self.run_all([document], cancel_event)

    def run_all(
        self,
        documents: Iterable[Document],
        cancel_event: Optional[threading.Event] = None,
    ) -> list[ValidationError]:
        """Validate several documents inside a single header/footer bracket.

        Args:
            documents: Documents to inspect, in output order
            cancel_event: Optional event checked between documents, sections
                and sentences

        Returns:
            Findings of every document, concatenated in input order

        Raises:
            ValidationCancelledError: if cancel_event was set; the sink footer
                is still flushed
        """
        start_time = time.perf_counter()
        run = _Run(self.sink, cancel_event)
        count = 0

        self.sink.flush_header()
        try:
            for document in documents:
                run.check_cancelled()
                self._validate_document(self.validator_set, document, run)
                count += 1
        except ValidationCancelledError:
            logger.warning("validation_cancelled", documents=count, findings=len(run.errors))
            raise
        finally:
            self.sink.flush_footer()

        self._log_complete(run, count, start_time)
        return run.errors

    def run_parallel(
        self,
        documents: Iterable[Document],
        max_workers: Optional[int] = None,
    ) -> list[ValidationError]:
        """Validate documents concurrently, one private validator clone per document.

        Findings are returned (and streamed to the sink) in input order, so
        the output equals that of run_all().

        Args:
            documents: Documents to inspect
            max_workers: Thread pool size; defaults to settings.MAX_WORKERS

        Returns:
            Findings of every document, concatenated in input order
        """
        start_time = time.perf_counter()
        documents = list(documents)
        max_workers = max_workers or get_settings().MAX_WORKERS

        def work(document: Document) -> _Run:
            run = _Run(NullSink(), None)
            self._validate_document(self.validator_set.clone(), document, run)
            return run

        merged = _Run(self.sink, None)
        self.sink.flush_header()
        try:
            with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="docinspect") as pool:
                for run in pool.map(work, documents):
                    for error in run.errors:
                        merged.errors.append(error)
                        self.sink.flush_error(error)
                    for name, duration in run.timings.items():
                        merged.timings[name] += duration
                    merged.faults += run.faults
        finally:
            self.sink.flush_footer()

        self._log_complete(merged, len(documents), start_time, workers=max_workers)
        return merged.errors

    def clone(self) -> "ValidationEngine":
        """Engine over a cloned validator set, sharing this engine's sink."""
        return ValidationEngine(self.validator_set.clone(), self.sink)

    # ── Traversal ──

    def _validate_document(self, validators: ValidatorSet, document: Document, run: _Run) -> None:
        for validator in validators.document:
            self._invoke(validator, document, run, target_type="document", file=document.file_name)

        for section in document.sections:
            self._validate_section(validators, section, run)

    def _validate_section(self, validators: ValidatorSet, section: Section, run: _Run) -> None:
        run.check_cancelled()
        for validator in validators.section:
            self._invoke(validator, section, run, target_type="section", header=section.header)

        for paragraph in section.paragraphs:
            self._validate_paragraph(validators, paragraph, run)

        for child in section.sections:
            self._validate_section(validators, child, run)

    def _validate_paragraph(self, validators: ValidatorSet, paragraph: Paragraph, run: _Run) -> None:
        for validator in validators.sentence:
            for sentence in paragraph.sentences:
                run.check_cancelled()
                self._invoke(
                    validator,
                    sentence,
                    run,
                    target_type="sentence",
                    line=sentence.line_number,
                    sentence=sentence.content[:80],
                )

    def _invoke(self, validator: BaseValidator, target, run: _Run, **context) -> None:
        """Call one validator on one target; faults are logged, never propagated."""
        v_start = time.perf_counter()
        try:
            # Materialize inside the guard: lazy results can fail while iterated
            errors = list(validator.validate(target))
        except Exception as e:
            run.faults += 1
            logger.error(
                "validator_failed",
                validator=validator.name,
                scope=validator.scope.value,
                error=str(e),
                error_type=type(e).__name__,
                **context,
            )
            return
        finally:
            run.timings[validator.name] += (time.perf_counter() - v_start) * 1000

        for error in errors:
            run.errors.append(error)
            run.sink.flush_error(error)

    @staticmethod
    def _log_complete(run: _Run, documents: int, start_time: float, **extra) -> None:
        total_duration = (time.perf_counter() - start_time) * 1000
        logger.info(
            "validation_complete",
            documents=documents,
            total_errors=len(run.errors),
            faults=run.faults,
            duration_ms=round(total_duration, 2),
            validator_timings={name: round(ms, 2) for name, ms in run.timings.items()},
            **extra,
        )
