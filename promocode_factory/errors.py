"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
PARTNER_INACTIVE = "PARTNER_INACTIVE"
INVALID_LIMIT = "INVALID_LIMIT"

LIMIT_MUST_BE_POSITIVE = "Limit must be greater than 0"

# Largest value the partner_promo_code_limits.limit column (32-bit INTEGER) holds
MAX_LIMIT = 2_147_483_647
LIMIT_TOO_LARGE = f"Limit must not be greater than {MAX_LIMIT}"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class DomainValidationError(DomainError):
    """Raised when business rules or domain validation fail."""

    pass


class PartnerNotFoundError(NotFoundError):
    """Raised when no partner exists for the given id."""

    pass


class LimitNotFoundError(NotFoundError):
    """Raised when a promo code limit does not exist for the given partner."""

    pass


class PartnerInactiveError(DomainValidationError):
    """Raised when limits are changed on a partner that has been deactivated."""

    pass


class InvalidLimitError(DomainValidationError):
    """Raised when the requested limit is missing or not greater than zero."""

    def __init__(self, message: str = LIMIT_MUST_BE_POSITIVE):
        super().__init__(message)
