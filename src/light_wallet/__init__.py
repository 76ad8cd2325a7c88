"""light-wallet — pending transaction lifecycle for light wallet clients."""

__version__ = "0.1.0"
