class ReformCalError(Exception):
    """Base error."""

class DomainError(ReformCalError, ValueError):
    """Raised for a date or shift target that does not exist in the calendar."""
