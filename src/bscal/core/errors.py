class BscalError(Exception):
    """Base error."""

class InvalidDateError(BscalError, ValueError):
    """Raised when a BS date is not a legal (year, month, day) in the table."""

class OutOfRangeError(BscalError, ValueError):
    """Raised when an AD date or an arithmetic result leaves the supported window."""

class DataIntegrityError(BscalError):
    """Raised when the calendar reference data is incomplete or inconsistent."""
