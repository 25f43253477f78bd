"""Exception hierarchy for the envspaces package.

All package errors derive from :class:`EnvSpacesError`, which carries a
severity level, a free-form context mapping and a recovery suggestion so that
callers can log failures consistently. Validation failures additionally
subclass :class:`ValueError` so generic ``except ValueError`` handlers keep
working.
"""

import enum
import logging
import time
import uuid
from typing import Any, Dict, List, Optional, Union

RECOVERY_SUGGESTION_MAX_LENGTH = 500
REPR_VALUE_MAX_LENGTH = 200

__all__ = [
    "EnvSpacesError",
    "ValidationError",
    "ConfigurationError",
    "ErrorSeverity",
    "format_error_details",
]


class ErrorSeverity(enum.IntEnum):
    """How serious an error is; selects the level it is logged at."""

    LOW = 1
    MEDIUM = 2  # rejected caller input
    HIGH = 3  # unusable configuration
    CRITICAL = 4

    def get_description(self) -> str:
        return _SEVERITY_DESCRIPTIONS[self]

    def to_logging_level(self) -> int:
        return _SEVERITY_LOG_LEVELS[self]


_SEVERITY_DESCRIPTIONS = {
    ErrorSeverity.LOW: "Minor issue, processing continued",
    ErrorSeverity.MEDIUM: "Rejected input that the caller can correct",
    ErrorSeverity.HIGH: "Configuration that cannot be used as given",
    ErrorSeverity.CRITICAL: "Failure that leaves the package unusable",
}

_SEVERITY_LOG_LEVELS = {
    ErrorSeverity.LOW: logging.INFO,
    ErrorSeverity.MEDIUM: logging.WARNING,
    ErrorSeverity.HIGH: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[: limit - 3] + "..."


def _short_value(value: Any) -> Any:
    """Keep large values (arrays, long strings) out of error details."""
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return _truncate(value, REPR_VALUE_MAX_LENGTH)
    return _truncate(repr(value), REPR_VALUE_MAX_LENGTH)


def _coerce_severity(severity: Union[ErrorSeverity, str]) -> ErrorSeverity:
    if isinstance(severity, ErrorSeverity):
        return severity
    return ErrorSeverity.__members__.get(str(severity).upper(), ErrorSeverity.MEDIUM)


class EnvSpacesError(Exception):
    """Base class for every error raised by envspaces.

    Args:
        message: Human-readable description.
        context: Extra key/value pairs describing where the error happened.
        severity: An :class:`ErrorSeverity` or its name; unknown names fall
            back to ``MEDIUM``.
        **details: Free-form details stored under ``error_details``.
    """

    default_suggestion = "Check the arguments against the envspaces documentation."

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        severity: Union[ErrorSeverity, str] = ErrorSeverity.MEDIUM,
        **details: Any,
    ):
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = dict(context or {})
        self.severity = _coerce_severity(severity)
        self.error_id = str(uuid.uuid4())
        self.timestamp = time.time()
        self.error_details: Dict[str, Any] = dict(details)
        self.recovery_suggestion: Optional[str] = None
        self.logged = False

    def set_recovery_suggestion(self, suggestion: str) -> None:
        self.recovery_suggestion = _truncate(suggestion, RECOVERY_SUGGESTION_MAX_LENGTH)

    def add_context(self, key: str, value: Any) -> None:
        if not isinstance(key, str) or not key:
            raise ValueError("Context key must be a non-empty string")
        self.context[key] = _short_value(value)

    def get_error_details(self) -> Dict[str, Any]:
        """Return a serializable summary of the error for logs and reports."""
        details: Dict[str, Any] = {
            "error_id": self.error_id,
            "exception_type": type(self).__name__,
            "module": type(self).__module__,
            "message": self.message,
            "severity": self.severity.name,
            "severity_description": self.severity.get_description(),
            "timestamp": self.timestamp,
            "error_details": self.error_details,
        }
        if self.context:
            details["context"] = dict(self.context)
        if self.recovery_suggestion:
            details["recovery_suggestion"] = self.recovery_suggestion
        return details

    def log_error(self, logger: Optional[logging.Logger] = None) -> None:
        """Log the error at its severity's level; repeated calls are no-ops."""
        if self.logged:
            return
        target = logger or logging.getLogger("envspaces.exceptions")
        suffix = ""
        if self.context:
            suffix = " | Context: " + ", ".join(f"{k}={v}" for k, v in self.context.items())
        target.log(self.severity.to_logging_level(), f"[{self.error_id}] {self.message}{suffix}")
        self.logged = True


class ValidationError(EnvSpacesError, ValueError):
    """A caller-supplied value was rejected.

    ``parameter_value`` is stored in shortened form so arrays do not bloat
    logs. Compound failures can be recorded with :meth:`add_validation_error`.
    """

    def __init__(
        self,
        message: str,
        parameter_name: Optional[str] = None,
        parameter_value: Optional[Any] = None,
        expected_format: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context=context, severity=ErrorSeverity.MEDIUM)
        self.parameter_name = parameter_name
        self.parameter_value = _short_value(parameter_value)
        self.expected_format = expected_format
        self.validation_errors: List[Dict[str, str]] = []

        if parameter_name and expected_format:
            self.set_recovery_suggestion(f"Provide {parameter_name} as {expected_format}.")
        else:
            self.set_recovery_suggestion(self.default_suggestion)

    def add_validation_error(self, error_message: str, field_name: Optional[str] = None) -> None:
        if not isinstance(error_message, str) or not error_message:
            raise ValueError("Error message must be a non-empty string")
        entry = {"message": error_message}
        if field_name:
            entry["field_name"] = field_name
        self.validation_errors.append(entry)
        if len(self.validation_errors) > 1:
            self.set_recovery_suggestion(
                "Multiple validation errors detected; review every listed parameter."
            )

    def get_validation_details(self) -> Dict[str, Any]:
        details = self.get_error_details()
        details["parameter_name"] = self.parameter_name
        details["parameter_value"] = self.parameter_value
        details["expected_format"] = self.expected_format
        details["validation_errors"] = list(self.validation_errors)
        return details


class ConfigurationError(EnvSpacesError):
    """A configuration mapping or model could not be turned into an object."""

    def __init__(
        self,
        message: str,
        config_parameter: Optional[str] = None,
        parameter_value: Optional[Any] = None,
        valid_options: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, severity=ErrorSeverity.HIGH)
        self.config_parameter = config_parameter
        self.parameter_value = _short_value(parameter_value)
        self.valid_options = dict(valid_options or {})

        if config_parameter and self.valid_options:
            fields = ", ".join(list(self.valid_options)[:5])
            self.set_recovery_suggestion(f"Valid fields for {config_parameter}: {fields}")
        else:
            self.set_recovery_suggestion(self.default_suggestion)


def format_error_details(error: BaseException) -> str:
    """Render an exception as a single line suitable for log output."""
    line = f"{type(error).__name__}: {error}"
    suggestion = getattr(error, "recovery_suggestion", None)
    if isinstance(error, EnvSpacesError) and suggestion:
        line = f"{line} | suggestion: {suggestion}"
    return line
