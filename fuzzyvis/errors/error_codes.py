"""
Central registry of error codes for the FuzzyVis application.

Error codes follow the pattern: CATEGORY-ErrorName

Categories:
- MF: Membership function parameter errors
- CONFIG: Configuration loading and validation errors
- PROC: Processing errors (sampling, fuzzification)

Usage:
    from fuzzyvis.errors.error_codes import ErrorCodes

    raise ConstraintViolationError(
        message="triangular: require a <= b <= c",
        error_code=ErrorCodes.MF_CONSTRAINT_VIOLATION,
        ...
    )
"""


class ErrorCodes:
    """Central registry of error codes for consistent error handling."""

    # Membership function errors
    MF_NON_FINITE_PARAMETER = "MF-NonFiniteParameter"
    MF_CONSTRAINT_VIOLATION = "MF-ConstraintViolation"
    MF_INVALID_PARAMETER_COUNT = "MF-InvalidParameterCount"
    MF_UNKNOWN_TYPE = "MF-UnknownType"

    # Configuration errors
    CONFIG_FILE_NOT_FOUND = "CONFIG-FileNotFound"
    CONFIG_INVALID_YAML = "CONFIG-InvalidYaml"
    CONFIG_VALIDATION_FAILED = "CONFIG-ValidationFailed"
    CONFIG_LOAD_FAILED = "CONFIG-LoadFailed"
    CONFIG_INVALID_DOMAIN = "CONFIG-InvalidDomain"
    CONFIG_DUPLICATE_SET_ID = "CONFIG-DuplicateSetId"

    # Processing errors
    PROC_UNKNOWN_SET = "PROC-UnknownFuzzySet"
    PROC_INVALID_RESOLUTION = "PROC-InvalidResolution"
