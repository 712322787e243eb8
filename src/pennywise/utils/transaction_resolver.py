"""Utility for resolving abbreviated transaction IDs."""

from pennywise.domain.errors import NotFoundError, ValidationError, transaction_not_found
from pennywise.domain.transaction import TransactionService

MIN_PREFIX_LENGTH = 4


def resolve_transaction_id(service: TransactionService, reference: str) -> str:
    """Resolve a full transaction ID or a unique ID prefix to the full ID.

    Args:
        service: TransactionService instance
        reference: Full ID, or the first characters of one (at least four)

    Returns:
        Full transaction ID

    Raises:
        NotFoundError: If no transaction matches
        ValidationError: If the prefix is too short or matches several
    """
    reference = reference.strip()
    if service.get_transaction(reference) is not None:
        return reference

    if len(reference) < MIN_PREFIX_LENGTH:
        raise ValidationError(
            f"Transaction reference '{reference}' is too short; "
            f"use at least {MIN_PREFIX_LENGTH} characters",
            code="ambiguous_reference",
        )

    matches = [
        txn.id for txn in service.list_transactions() if txn.id.startswith(reference)
    ]
    if not matches:
        raise NotFoundError(transaction_not_found(reference))
    if len(matches) > 1:
        raise ValidationError(
            f"Transaction reference '{reference}' matches {len(matches)} transactions",
            code="ambiguous_reference",
        )
    return matches[0]
