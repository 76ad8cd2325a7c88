"""Engine services."""

from light_wallet.engine.services.pending_transaction_service import PendingTransactionService

__all__ = ["PendingTransactionService"]
