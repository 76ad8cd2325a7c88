"""Recipient of a pending transaction: an external address or an internal account.

Modelled as a tagged union so callers can branch exhaustively::

    match tx.recipient:
        case AddressRecipient(address=addr): ...
        case InternalAccountRecipient(account_index=idx): ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from light_wallet.errors.definitions import ErrInvalidRecipient


@dataclass(frozen=True)
class AddressRecipient:
    """Funds sent to an encoded address outside the wallet."""

    address: str


@dataclass(frozen=True)
class InternalAccountRecipient:
    """Funds moved to another account of the same wallet (e.g. shielding)."""

    account_index: int


PendingTransactionRecipient: TypeAlias = AddressRecipient | InternalAccountRecipient


def recipient_from_dict(data: Any) -> PendingTransactionRecipient:
    """Parse a recipient from its record form.

    Accepts ``{"type": "address", "address": ...}`` or
    ``{"type": "internal_account", "account_index": ...}`` (camelCase
    ``accountIndex`` is also accepted).

    Raises:
        PendingTransactionError: If the shape is not recognised.
    """
    if isinstance(data, AddressRecipient | InternalAccountRecipient):
        return data
    if not isinstance(data, dict):
        raise ErrInvalidRecipient

    kind = data.get("type")
    if kind == "address":
        address = data.get("address")
        if not isinstance(address, str) or not address:
            raise ErrInvalidRecipient
        return AddressRecipient(address=address)
    if kind == "internal_account":
        index = data.get("account_index", data.get("accountIndex"))
        if not isinstance(index, int) or isinstance(index, bool) or index < 0:
            raise ErrInvalidRecipient
        return InternalAccountRecipient(account_index=index)
    raise ErrInvalidRecipient


def recipient_to_dict(recipient: PendingTransactionRecipient) -> dict[str, Any]:
    """Serialize a recipient to its record form."""
    match recipient:
        case AddressRecipient(address=address):
            return {"type": "address", "address": address}
        case InternalAccountRecipient(account_index=index):
            return {"type": "internal_account", "account_index": index}
    raise ErrInvalidRecipient
