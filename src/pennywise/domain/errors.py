"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling. ``code`` is a short
    machine-readable identifier used by the API error body.
    """

    code = "domain_error"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""

    code = "invalid_input"


class NotFoundError(DomainError):
    """Requested transaction does not exist."""

    code = "not_found"


class StoreError(DomainError):
    """Unexpected failure in the transaction store."""

    code = "unknown"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def missing_fields(fields: list[str]) -> str:
    """Return message for missing required fields."""
    return f"Missing required fields: {', '.join(fields)}"


def invalid_choice(field_name: str, value: object, choices: list[str]) -> str:
    """Return message for a value outside an enumeration."""
    return (
        f"Invalid {field_name} '{value}'. "
        f"Must be one of: {', '.join(choices)}"
    )


def amount_out_of_range(max_amount: object) -> str:
    """Return message for a non-positive or oversized amount."""
    return f"Amount must be a positive number no greater than {max_amount}"


def description_too_long(max_length: int) -> str:
    """Return message for an oversized description."""
    return f"Description must be at most {max_length} characters"


def installment_index_out_of_range(index: int, count: int) -> str:
    """Return message when the installment index exceeds the count."""
    return f"Installment index {index} cannot be greater than installment count {count}"
