"""WalletError — base exception class for all light-wallet errors."""

from __future__ import annotations


class WalletError(Exception):
    """Base error for all light wallet operations.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code string.
    """

    def __init__(self, message: str, *, code: str = "wallet-error") -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class PendingTransactionError(WalletError):
    """A pending transaction record failed boundary validation."""

    def __init__(self, message: str, *, code: str = "pending-tx-invalid") -> None:
        super().__init__(message, code=code)
