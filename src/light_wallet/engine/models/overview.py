"""Transaction overview — the generic display shape shared with mined transactions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TransactionOverview:
    """A transaction as shown in wallet history.

    Pending transactions fill the note/index fields with neutral defaults
    because those values only exist once the chain has scanned the block.

    Attributes:
        block_time: Seconds since epoch (creation time for pending records).
        expiry_height: Expiry height, ``-1`` for none.
        fee: Fee in zatoshi, ``None`` when unknown.
        id: Local identifier, ``-1`` when not persisted.
        index: Position within the block, ``None`` when not mined.
        is_wallet_internal: Whether funds stayed inside the wallet.
        has_change: Whether the transaction produced change.
        memo_count: Number of memos attached.
        mined_height: Mined height, ``-1`` when not mined.
        raw: Encoded transaction bytes, if any.
        raw_id: Raw transaction id (empty when not yet encoded).
        received_note_count: Notes received by the wallet.
        sent_note_count: Notes sent by the wallet.
        value: Amount in zatoshi.
    """

    block_time: float
    expiry_height: int
    fee: int | None
    id: int
    index: int | None = None
    is_wallet_internal: bool = False
    has_change: bool = False
    memo_count: int = 0
    mined_height: int = -1
    raw: bytes | None = None
    raw_id: bytes = b""
    received_note_count: int = 0
    sent_note_count: int = 0
    value: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a display dict; byte fields become hex strings."""
        return {
            "blockTime": self.block_time,
            "expiryHeight": self.expiry_height,
            "fee": self.fee,
            "id": self.id,
            "index": self.index,
            "isWalletInternal": self.is_wallet_internal,
            "hasChange": self.has_change,
            "memoCount": self.memo_count,
            "minedHeight": self.mined_height,
            "raw": self.raw.hex() if self.raw is not None else None,
            "rawId": self.raw_id.hex(),
            "receivedNoteCount": self.received_note_count,
            "sentNoteCount": self.sent_note_count,
            "value": self.value,
        }
