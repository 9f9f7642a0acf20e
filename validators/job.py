import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from core.exceptions import CommandTimeoutError, InputError, SelectionError, ValidatorError
from core.runner import run_command
from schemas.validation import ValidationOutcome, ValidationRequest
from validators.languages import Runner
from validators.selector import select_validator

logger = logging.getLogger(__name__)


class ValidationJob:
    """
    Runs at most one validation at a time on a background worker.

    `submit` returns immediately; a submission made while another one is
    still running is rejected. Each accepted submission produces exactly one
    ValidationOutcome, handed to `on_complete` when given, otherwise kept in
    a single slot until read with `poll` or `wait`. The handler is called on
    the worker thread; a job built with one has nothing to `poll` or `wait` for.
    """

    def __init__(
        self,
        runner: Runner = run_command,
        timeout: float | None = None,
        on_complete: Callable[[ValidationOutcome], None] | None = None,
    ):
        self.runner = runner
        self.timeout = timeout
        self.on_complete = on_complete

        self._cond = threading.Condition()
        self._in_progress = False
        self._outcome: ValidationOutcome | None = None
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="validation")

    @property
    def in_progress(self) -> bool:
        with self._cond:
            return self._in_progress

    def submit(self, file_path: str, language: str = "auto") -> bool:
        with self._cond:
            if self._in_progress:
                logger.info("Rejected %r: validation already in progress", file_path)
                return False
            self._in_progress = True
            self._outcome = None

        try:
            request = ValidationRequest(file_path=file_path, language=language)
            self._executor.submit(self._run, request)
        except Exception:
            with self._cond:
                self._in_progress = False
            raise

        logger.info("Accepted %r (language=%s)", request.file_path, request.language)
        return True

    def snapshot(self) -> tuple[bool, ValidationOutcome | None]:
        """Read the in-progress flag and take any delivered outcome together."""
        with self._cond:
            outcome, self._outcome = self._outcome, None
            return self._in_progress, outcome

    def poll(self) -> ValidationOutcome | None:
        """Take the delivered outcome, or None if there is nothing to take."""
        with self._cond:
            outcome, self._outcome = self._outcome, None
            return outcome

    def wait(self, timeout: float | None = None) -> ValidationOutcome:
        """Block until an outcome is delivered and take it."""
        if self.on_complete is not None:
            raise RuntimeError("Outcomes are delivered to the completion handler")
        with self._cond:
            if not self._cond.wait_for(lambda: self._outcome is not None, timeout):
                raise TimeoutError("No validation outcome was delivered in time")
            outcome, self._outcome = self._outcome, None
            return outcome

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def _run(self, request: ValidationRequest) -> None:
        outcome = None
        try:
            outcome = self._process(request)
        except CommandTimeoutError as e:
            outcome = ValidationOutcome(
                status=e.status,
                message=f"Error occurred during validation: {e}",
            )
        except ValidatorError as e:
            outcome = ValidationOutcome(status=e.status, message=str(e))
        except Exception as e:
            logger.exception("Validation of %r failed", request.file_path)
            outcome = ValidationOutcome(
                status="system_error",
                message=f"Error occurred during validation: {e}",
            )
        finally:
            if outcome is None:
                outcome = ValidationOutcome(
                    status="system_error",
                    message="Unknown error occurred during validation.",
                )
            self._deliver(outcome)

    def _process(self, request: ValidationRequest) -> ValidationOutcome:
        file_path = request.file_path
        if not file_path:
            raise InputError("Please select a file to validate.")
        if not os.path.exists(file_path):
            raise InputError(f"File does not exist: {file_path}")

        variant = select_validator(request.language, file_path)
        if variant is None:
            raise SelectionError("Unsupported file type or language selection.")
        if not variant.is_compatible(file_path):
            raise SelectionError("Selected language doesn't match the file extension.")

        return variant.validate(file_path, runner=self.runner, timeout=self.timeout)

    def _deliver(self, outcome: ValidationOutcome) -> None:
        logger.info("Validation finished: %s", outcome.status)
        try:
            if self.on_complete is not None:
                self.on_complete(outcome)
            else:
                with self._cond:
                    self._outcome = outcome
        except Exception:
            logger.exception("Completion handler failed")
        finally:
            with self._cond:
                self._in_progress = False
                self._cond.notify_all()
