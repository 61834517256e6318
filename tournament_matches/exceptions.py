"""
Custom exceptions for the match score service.

These exceptions provide clear error categories for a score update in flight:
- ParseError: A payload could not be decoded into a domain object
- ScoreValidationError: A score update request was rejected before mutation
- DelegateError: The match delegate reported a domain failure
- ConfigurationError: Missing or invalid service configuration
"""


class MatchServiceError(Exception):
    """Base exception for all match service errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ParseError(MatchServiceError):
    """Payload is not valid JSON or does not fit the expected shape."""
    pass


class ConfigurationError(MatchServiceError):
    """Missing or invalid service configuration."""
    pass


# =============================================================================
# VALIDATION
# =============================================================================

class ScoreValidationError(MatchServiceError):
    """A score update request was rejected. Never reaches the delegate."""
    pass


class InvalidJsonError(ScoreValidationError):
    """Request body is not syntactically valid JSON."""
    pass


class InvalidShapeError(ScoreValidationError):
    """Score object missing or holding non-integer values."""
    pass


class InvalidRangeError(ScoreValidationError):
    """Score values out of range."""
    pass


class IdentityMismatchError(ScoreValidationError):
    """Identifier in the body disagrees with the addressed match."""
    pass


# =============================================================================
# DELEGATE
# =============================================================================

class DelegateError(MatchServiceError):
    """Unknown or internal failure reported by the match delegate."""
    pass


class NotFoundError(DelegateError):
    """Tournament or match does not exist."""
    pass


class InvalidFormatError(DelegateError):
    """Delegate refused the data as malformed."""
    pass


class DuplicateError(DelegateError):
    """Entity already exists."""
    pass
