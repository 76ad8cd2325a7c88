"""Pending transaction — a locally created transaction not yet final on chain.

A ``PendingTransaction`` is an immutable snapshot of the stored record. The
encoder, submitter and chain sync each produce a new snapshot via
:meth:`PendingTransaction.updated`; the status predicates below only classify
the snapshot they are given. No status field is stored: every stage is
derived from the raw attributes and, where relevant, the current chain height.

Reachable classifications::

    creating -> failed encoding | encoded
    encoded -> failed submit | submit success
    submit success -> pending -> mined -> confirmed
                   -> expired
    any -> cancelled (orthogonal flag, checked first by consumers)
"""

from __future__ import annotations

import dataclasses
import logging
import time
from dataclasses import dataclass
from typing import Any, Protocol, Self

from light_wallet.config.defaults import DEFAULT_STALE_TOLERANCE, NO_HEIGHT
from light_wallet.engine.models.overview import TransactionOverview
from light_wallet.engine.models.recipient import (
    PendingTransactionRecipient,
    recipient_from_dict,
    recipient_to_dict,
)
from light_wallet.errors.definitions import (
    ErrInvalidBytes,
    ErrInvalidExpiryHeight,
    ErrInvalidMinedHeight,
    ErrInvalidPendingTransaction,
    ErrInvalidRecipient,
    ErrNegativeValue,
)

logger = logging.getLogger(__name__)


class RawIdentifiable(Protocol):
    """Anything identified by the id computed from its encoded bytes."""

    @property
    def raw_transaction_id(self) -> bytes | None: ...


def _to_bytes(value: Any) -> bytes | None:
    """Coerce a stored byte field (bytes or hex string) to ``bytes``."""
    if value is None:
        return None
    if isinstance(value, bytes | bytearray | memoryview):
        return bytes(value)
    if isinstance(value, str):
        try:
            return bytes.fromhex(value)
        except ValueError as exc:
            raise ErrInvalidBytes from exc
    raise ErrInvalidBytes


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


def _optional_str(value: Any) -> str | None:
    if value is not None and not isinstance(value, str):
        raise TypeError(f"expected str or None, got {type(value).__name__}")
    return value


def _pick(data: dict[str, Any], snake: str, camel: str, default: Any = None) -> Any:
    """Read a field by its snake_case or camelCase key."""
    if snake in data:
        return data[snake]
    return data.get(camel, default)


@dataclass(frozen=True)
class PendingTransaction:
    """Snapshot of a sent transaction that has not been confirmed yet.

    Attributes:
        value: Amount in zatoshi.
        recipient: External address or internal account.
        account_index: Account the funds were sent from.
        id: Local identifier, ``None`` until persisted.
        memo: Memo bytes, if any.
        fee: Fee in zatoshi, ``None`` until computed.
        raw: Encoded transaction, ``None`` until encoding succeeds.
        mined_height: Height the transaction was mined at, ``-1`` if not mined.
        expiry_height: Height after which it can no longer be mined, ``-1`` for none.
        cancelled: Greater than zero when cancelled by the user.
        encode_attempts: Number of encoding attempts made.
        submit_attempts: Number of submission attempts made.
        error_message: Submission error text, if any.
        error_code: Submission error code; negative means failure.
        create_time: Creation time in seconds since epoch.
        raw_transaction_id: Id derived from the encoded bytes.
    """

    value: int
    recipient: PendingTransactionRecipient
    account_index: int
    id: int | None = None
    memo: bytes | None = None
    fee: int | None = None
    raw: bytes | None = None
    mined_height: int = NO_HEIGHT
    expiry_height: int = NO_HEIGHT
    cancelled: int = 0
    encode_attempts: int = 0
    submit_attempts: int = 0
    error_message: str | None = None
    error_code: int | None = None
    create_time: float = 0.0
    raw_transaction_id: bytes | None = None

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ErrNegativeValue
        if self.mined_height < NO_HEIGHT:
            raise ErrInvalidMinedHeight
        if self.expiry_height < NO_HEIGHT:
            raise ErrInvalidExpiryHeight

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(
        cls,
        value: int,
        recipient: PendingTransactionRecipient,
        account_index: int,
        *,
        memo: bytes | None = None,
        expiry_height: int = NO_HEIGHT,
        create_time: float | None = None,
    ) -> Self:
        """Create the record for a spend the wallet has just decided on."""
        return cls(
            value=value,
            recipient=recipient,
            account_index=account_index,
            memo=memo,
            expiry_height=expiry_height,
            create_time=time.time() if create_time is None else create_time,
        )

    def updated(self, **changes: Any) -> Self:
        """Return a copy with *changes* applied; the snapshot itself is unchanged."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a snapshot from a stored record (snake_case or camelCase keys).

        Raises:
            PendingTransactionError: If the record is malformed.
        """
        if not isinstance(data, dict):
            raise ErrInvalidPendingTransaction
        if "recipient" not in data:
            raise ErrInvalidRecipient

        try:
            tx = cls(
                value=int(data.get("value", 0)),
                recipient=recipient_from_dict(data["recipient"]),
                account_index=int(_pick(data, "account_index", "accountIndex", 0)),
                id=_optional_int(data.get("id")),
                memo=_to_bytes(data.get("memo")),
                fee=_optional_int(data.get("fee")),
                raw=_to_bytes(_pick(data, "raw", "rawBytes", data.get("raw_bytes"))),
                mined_height=int(_pick(data, "mined_height", "minedHeight", NO_HEIGHT)),
                expiry_height=int(_pick(data, "expiry_height", "expiryHeight", NO_HEIGHT)),
                cancelled=int(data.get("cancelled", 0)),
                encode_attempts=int(_pick(data, "encode_attempts", "encodeAttempts", 0)),
                submit_attempts=int(_pick(data, "submit_attempts", "submitAttempts", 0)),
                error_message=_optional_str(_pick(data, "error_message", "errorMessage")),
                error_code=_optional_int(_pick(data, "error_code", "errorCode")),
                create_time=float(_pick(data, "create_time", "createTime", 0.0)),
                raw_transaction_id=_to_bytes(
                    _pick(data, "raw_transaction_id", "rawTransactionId")
                ),
            )
        except (TypeError, ValueError) as exc:
            logger.debug("Rejected pending transaction record: %s", exc)
            raise ErrInvalidPendingTransaction from exc

        logger.debug("Loaded pending transaction id=%s", tx.id)
        return tx

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a record dict; byte fields become hex strings."""
        return {
            "id": self.id,
            "value": self.value,
            "memo": self.memo.hex() if self.memo is not None else None,
            "fee": self.fee,
            "raw": self.raw.hex() if self.raw is not None else None,
            "recipient": recipient_to_dict(self.recipient),
            "account_index": self.account_index,
            "mined_height": self.mined_height,
            "expiry_height": self.expiry_height,
            "cancelled": self.cancelled,
            "encode_attempts": self.encode_attempts,
            "submit_attempts": self.submit_attempts,
            "error_message": self.error_message,
            "error_code": self.error_code,
            "create_time": self.create_time,
            "raw_transaction_id": (
                self.raw_transaction_id.hex() if self.raw_transaction_id is not None else None
            ),
        }

    # ------------------------------------------------------------------
    # Status predicates
    # ------------------------------------------------------------------

    @property
    def _raw_is_empty(self) -> bool:
        return not self.raw

    @property
    def is_creating(self) -> bool:
        """Being built: no bytes yet, nothing submitted, no failure recorded."""
        return (
            self._raw_is_empty
            and self.submit_attempts <= 0
            and not self.is_failed_submit
            and not self.is_failed_encoding
        )

    @property
    def is_failed_encoding(self) -> bool:
        """Encoding was attempted but produced no bytes."""
        return self._raw_is_empty and self.encode_attempts > 0

    @property
    def is_failed_submit(self) -> bool:
        """An error message or a negative error code was recorded."""
        return self.error_message is not None or (
            self.error_code is not None and self.error_code < 0
        )

    @property
    def is_failure(self) -> bool:
        return self.is_failed_encoding or self.is_failed_submit

    @property
    def is_cancelled(self) -> bool:
        return self.cancelled > 0

    @property
    def is_mined(self) -> bool:
        return self.mined_height > 0

    @property
    def is_submitted(self) -> bool:
        return self.submit_attempts > 0

    @property
    def is_submit_success(self) -> bool:
        """Accepted by the last submission; says nothing about chain inclusion."""
        return (
            self.submit_attempts > 0
            and (self.error_code is None or self.error_code >= 0)
            and self.error_message is None
        )

    def is_confirmed(
        self,
        current_height: int = NO_HEIGHT,
        *,
        stale_tolerance: int = DEFAULT_STALE_TOLERANCE,
    ) -> bool:
        """Whether the chain tip is at least *stale_tolerance* blocks from the mined height.

        The distance is absolute, so a tip lagging behind the mined height
        by the tolerance also counts as confirmed.
        """
        if self.mined_height <= 0:
            return False
        if current_height <= 0:
            return False
        # TODO: confirm with protocol owners whether a lagging tip should count.
        return abs(current_height - self.mined_height) >= stale_tolerance

    def is_expired(self, current_height: int = NO_HEIGHT) -> bool:
        """Unmined and the chain tip has reached the expiry height."""
        if self.is_mined or self.expiry_height == NO_HEIGHT:
            return False
        if current_height <= 0:
            return False
        return self.expiry_height <= current_height

    def is_pending(
        self,
        current_height: int = NO_HEIGHT,
        *,
        stale_tolerance: int = DEFAULT_STALE_TOLERANCE,
    ) -> bool:
        """Submitted successfully, encoded, not confirmed and not expired."""
        return (
            self.is_submit_success
            and not self.is_confirmed(current_height, stale_tolerance=stale_tolerance)
            and (self.expiry_height == NO_HEIGHT or self.expiry_height > current_height)
            and self.raw is not None
        )

    def is_same_transaction(self, other: RawIdentifiable) -> bool:
        """Compare by raw transaction id; unknown ids never match."""
        if self.raw_transaction_id is None or other.raw_transaction_id is None:
            return False
        return self.raw_transaction_id == other.raw_transaction_id

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def to_overview(self, default_fee: int) -> TransactionOverview:  # noqa: ARG002
        """Convert to the generic overview shape used by wallet history.

        ``default_fee`` mirrors the mined-transaction conversion and is not
        substituted: an unknown fee stays ``None``.
        """
        return TransactionOverview(
            block_time=self.create_time,
            expiry_height=self.expiry_height,
            fee=self.fee,
            id=self.id if self.id is not None else -1,
            index=None,
            is_wallet_internal=False,
            has_change=False,
            memo_count=0,
            mined_height=self.mined_height,
            raw=self.raw,
            raw_id=self.raw_transaction_id if self.raw_transaction_id is not None else b"",
            received_note_count=0,
            sent_note_count=0,
            value=self.value,
        )
