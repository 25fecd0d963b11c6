class UtilityError(Exception):
    """Base exception for utilities catalog errors."""


class UtilityNotFoundError(UtilityError):
    """Raised when a catalog entry cannot be found in the database."""


class InvalidUtilityError(UtilityError):
    """Raised for an unknown entry type or a blank value."""


class DuplicateUtilityError(UtilityError):
    """Raised when an entry with the same type and value already exists."""
