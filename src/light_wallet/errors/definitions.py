"""Predefined error instances."""

from __future__ import annotations

from light_wallet.errors.wallet_errors import PendingTransactionError

# -- Pending transaction ---------------------------------------------------

ErrInvalidPendingTransaction = PendingTransactionError("invalid pending transaction record")
ErrNegativeValue = PendingTransactionError(
    "pending transaction value must not be negative", code="pending-tx-negative-value"
)
ErrInvalidMinedHeight = PendingTransactionError(
    "mined height must be -1 (not mined) or a non-negative height",
    code="pending-tx-invalid-mined-height",
)
ErrInvalidExpiryHeight = PendingTransactionError(
    "expiry height must be -1 (no expiry) or a non-negative height",
    code="pending-tx-invalid-expiry-height",
)
ErrInvalidBytes = PendingTransactionError(
    "byte field must be bytes or a hex string", code="pending-tx-invalid-bytes"
)

# -- Recipient -------------------------------------------------------------

ErrInvalidRecipient = PendingTransactionError(
    "recipient must be an address or an internal account index",
    code="pending-tx-invalid-recipient",
)
