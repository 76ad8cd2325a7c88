"""Wallet error types and predefined error instances."""

from light_wallet.errors.wallet_errors import WalletError

__all__ = ["WalletError"]
