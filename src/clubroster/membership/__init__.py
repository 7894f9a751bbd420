"""Club membership store, join-date rules and the console driver."""

from .app import MembershipApp
from .dates import DateValidationError, format_join_date, parse_join_date, validate_join_date
from .store import MemberNotFoundError, MembershipStore

__all__ = [
    "DateValidationError",
    "MemberNotFoundError",
    "MembershipApp",
    "MembershipStore",
    "format_join_date",
    "parse_join_date",
    "validate_join_date",
]
