"""Pending transaction models."""

from light_wallet.engine.models.overview import TransactionOverview
from light_wallet.engine.models.pending_transaction import PendingTransaction, RawIdentifiable
from light_wallet.engine.models.recipient import (
    AddressRecipient,
    InternalAccountRecipient,
    PendingTransactionRecipient,
    recipient_from_dict,
    recipient_to_dict,
)
from light_wallet.engine.models.status import PendingTxStatus, classify

__all__ = [
    "AddressRecipient",
    "InternalAccountRecipient",
    "PendingTransaction",
    "PendingTransactionRecipient",
    "PendingTxStatus",
    "RawIdentifiable",
    "TransactionOverview",
    "classify",
    "recipient_from_dict",
    "recipient_to_dict",
]
