"""Pending transaction service — status queries bound to the chain config.

Holds no record state: callers pass the snapshots loaded from storage and the
chain height reported by the sync process.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING

from light_wallet.config.defaults import NO_HEIGHT
from light_wallet.config.settings import AppConfig
from light_wallet.engine.models.status import PendingTxStatus, classify

if TYPE_CHECKING:
    from collections.abc import Iterable

    from light_wallet.engine.models.overview import TransactionOverview
    from light_wallet.engine.models.pending_transaction import (
        PendingTransaction,
        RawIdentifiable,
    )

logger = logging.getLogger(__name__)


class PendingTransactionService:
    """Classify pending transactions using the configured confirmation depth."""

    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or AppConfig()

    @property
    def stale_tolerance(self) -> int:
        return self._config.chain.stale_tolerance

    @property
    def default_fee(self) -> int:
        return self._config.chain.default_fee

    def status(self, tx: PendingTransaction, current_height: int = NO_HEIGHT) -> PendingTxStatus:
        """Return the derived status of *tx* at *current_height*."""
        status = classify(tx, current_height, stale_tolerance=self.stale_tolerance)
        logger.debug("Pending tx id=%s at height %d: %s", tx.id, current_height, status)
        return status

    def is_confirmed(self, tx: PendingTransaction, current_height: int = NO_HEIGHT) -> bool:
        return tx.is_confirmed(current_height, stale_tolerance=self.stale_tolerance)

    def is_pending(self, tx: PendingTransaction, current_height: int = NO_HEIGHT) -> bool:
        return tx.is_pending(current_height, stale_tolerance=self.stale_tolerance)

    def pending(
        self, txs: Iterable[PendingTransaction], current_height: int = NO_HEIGHT
    ) -> list[PendingTransaction]:
        """Return the records still waiting for confirmation, in input order."""
        return [tx for tx in txs if self.is_pending(tx, current_height)]

    def status_counts(
        self, txs: Iterable[PendingTransaction], current_height: int = NO_HEIGHT
    ) -> dict[PendingTxStatus, int]:
        """Count records per derived status. Statuses with no records are omitted."""
        counts = Counter(self.status(tx, current_height) for tx in txs)
        if counts:
            logger.info(
                "Pending transactions at height %d: %s",
                current_height,
                ", ".join(f"{status}={n}" for status, n in sorted(counts.items())),
            )
        return dict(counts)

    def find_same(
        self, txs: Iterable[PendingTransaction], other: RawIdentifiable
    ) -> PendingTransaction | None:
        """Return the first record with the same raw transaction id as *other*."""
        for tx in txs:
            if tx.is_same_transaction(other):
                return tx
        return None

    def to_overviews(self, txs: Iterable[PendingTransaction]) -> list[TransactionOverview]:
        """Convert records to history overviews."""
        return [tx.to_overview(self.default_fee) for tx in txs]
