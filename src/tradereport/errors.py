from __future__ import annotations


class TradeReportError(ValueError):
    """Base class for input errors raised while building or querying trades."""


class MissingRequiredFieldError(TradeReportError):
    """A required trade instruction field was absent."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"{field_name} should be provided.")


class InvalidArgumentError(TradeReportError):
    """Invalid enumeration value: an unknown direction code, or a query called
    without a records argument.
    """


# Name used for the same error kind by callers matching on enumeration values
InvalidEnumerationValueError = InvalidArgumentError


class InvalidDateError(TradeReportError):
    """Date text not in the 'dd MMM yyyy' form."""
