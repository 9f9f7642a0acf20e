from schemas.validation import OutcomeStatus


class ValidatorError(Exception):
    """Base error for a validation job; `status` is the outcome it maps to."""

    status: OutcomeStatus = "system_error"


class InputError(ValidatorError):
    """No file was given, or the file does not exist."""

    status: OutcomeStatus = "system_error"


class SelectionError(ValidatorError):
    """No validator matches, or the chosen language doesn't fit the file."""

    status: OutcomeStatus = "selection_error"


class CommandTimeoutError(ValidatorError):
    status: OutcomeStatus = "system_error"

    def __init__(self, command: str, timeout: float):
        self.command = command
        self.timeout = timeout
        super().__init__(f"Command timed out after {timeout:g} seconds: {command}")
