"""
Exception hierarchy for the FuzzyVis application.

Membership functions raise subclasses of MembershipError; configuration
loading raises subclasses of ConfigurationError. All of them derive from
FuzzyVisError so callers can catch the whole family at once.
"""

from typing import Any, Optional


class FuzzyVisError(Exception):
    """
    Base exception class for all FuzzyVis errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for reference and documentation
        details: Optional dictionary with additional error details
        suggestion: Optional suggestion text for how to fix the error
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Initialize a new FuzzyVisError.

        Args:
            message: Human-readable error message
            error_code: Optional error code for reference and documentation
            details: Optional dictionary with additional error details
            suggestion: Optional suggestion text for how to fix the error
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestion = suggestion
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize the error to a dictionary.

        Returns:
            Dictionary with all error information
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "suggestion": self.suggestion,
        }


# --- Validation Errors ---


class ValidationError(FuzzyVisError):
    """
    Exception raised when caller-supplied values fail validation.

    The fix requires changing the values passed in, not editing a file.
    """

    pass


class MembershipError(ValidationError):
    """
    Base class for membership function call failures.

    The message always has the form "<functionName>: <description>", so
    str(error) is suitable for display as-is.

    Examples:
        >>> try:
        ...     triangular(5, 3, 2, 1)
        ... except MembershipError as e:
        ...     print(e)
        triangular: require a <= b <= c
    """

    @property
    def function_name(self) -> Optional[str]:
        """Name of the membership function that rejected the call."""
        return self.details.get("function")


class ParameterTypeError(MembershipError):
    """Exception raised when a parameter is not a finite real number."""

    pass


class ConstraintViolationError(MembershipError):
    """Exception raised when finite parameters violate a shape constraint."""

    pass


class ParameterCountError(MembershipError):
    """Exception raised when a parameter list does not match the function arity."""

    pass


class UnknownMembershipFunctionError(MembershipError):
    """Exception raised when a catalogue key is not registered."""

    pass


# --- Configuration Errors ---


class ConfigurationError(FuzzyVisError):
    """
    Configuration error with location context.

    Use for issues with fuzzy variable YAML files or settings. The fix
    typically requires **editing a file** rather than changing arguments.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        context: Dictionary with error location (file, section, field)
        details: Dictionary with structured error data
        suggestion: How to fix the error

    Examples:
        >>> raise ConfigurationError(
        ...     message="Fuzzy configuration file not found: fuzzy.yaml",
        ...     error_code="CONFIG-FileNotFound",
        ...     context={"file": "fuzzy.yaml"},
        ...     suggestion="Create the file or pass --config",
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[dict[str, Any]] = None,
        details: Optional[dict[str, Any]] = None,
        suggestion: str = "",
    ) -> None:
        """
        Initialize a configuration error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Where error occurred (file, section, field)
            details: Structured data about the error
            suggestion: How to fix the error
        """
        super().__init__(message, error_code, details)
        self.context = context or {}
        self.suggestion = suggestion

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize error to dictionary.

        Returns:
            Dictionary with all error information
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "details": self.details,
            "suggestion": self.suggestion,
        }

    def format_user_message(self) -> str:
        """
        Format a user-friendly error message with all context.

        Returns:
            Formatted error message string
        """
        parts = [f"Error: {self.message}"]

        if self.error_code:
            parts.append(f"Code: {self.error_code}")

        if self.context:
            context_parts = []
            if "file" in self.context:
                context_parts.append(f"File: {self.context['file']}")
            if "section" in self.context:
                context_parts.append(f"Section: {self.context['section']}")
            if context_parts:
                parts.append("Location: " + ", ".join(context_parts))

        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")

        return "\n".join(parts)

    def __str__(self) -> str:
        """String representation of the error."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class InvalidConfigurationError(ConfigurationError):
    """Exception raised when configuration content is invalid."""

    pass


class ConfigurationFileError(ConfigurationError):
    """Exception raised when a configuration file cannot be found or read."""

    pass


# --- Processing Errors ---


class ProcessingError(FuzzyVisError):
    """
    Base class for errors during fuzzification or sampling.

    Per-point membership failures are not processing errors; they are
    substituted with 0 by the engine.
    """

    pass
