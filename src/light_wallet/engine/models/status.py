"""Coarse lifecycle status derived from a pending transaction snapshot."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from light_wallet.config.defaults import DEFAULT_STALE_TOLERANCE, NO_HEIGHT

if TYPE_CHECKING:
    from light_wallet.engine.models.pending_transaction import PendingTransaction


class PendingTxStatus(enum.StrEnum):
    """Derived status of a pending transaction.

    Never stored; always recomputed with :func:`classify`.
    """

    CANCELLED = "cancelled"
    FAILED_ENCODING = "failed_encoding"
    FAILED_SUBMIT = "failed_submit"
    CREATING = "creating"
    ENCODED = "encoded"
    SUBMITTED = "submitted"
    MINED = "mined"
    CONFIRMED = "confirmed"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        """No further chain progress is expected for this status.

        Failures are not terminal: the encoder and submitter retry them.
        """
        return self in _TERMINAL


_TERMINAL = frozenset(
    {
        PendingTxStatus.CANCELLED,
        PendingTxStatus.CONFIRMED,
        PendingTxStatus.EXPIRED,
    }
)


def classify(
    tx: PendingTransaction,
    current_height: int = NO_HEIGHT,
    *,
    stale_tolerance: int = DEFAULT_STALE_TOLERANCE,
) -> PendingTxStatus:
    """Reduce the status predicates of *tx* to a single status.

    Cancellation wins over everything else, then failures, then chain
    progress. A record with bytes that has not been submitted is ``ENCODED``.
    """
    if tx.is_cancelled:
        return PendingTxStatus.CANCELLED
    if tx.is_failed_encoding:
        return PendingTxStatus.FAILED_ENCODING
    if tx.is_failed_submit:
        return PendingTxStatus.FAILED_SUBMIT
    if tx.is_creating:
        return PendingTxStatus.CREATING
    if tx.is_confirmed(current_height, stale_tolerance=stale_tolerance):
        return PendingTxStatus.CONFIRMED
    if tx.is_mined:
        return PendingTxStatus.MINED
    if tx.is_expired(current_height):
        return PendingTxStatus.EXPIRED
    if tx.is_submit_success:
        return PendingTxStatus.SUBMITTED
    return PendingTxStatus.ENCODED
