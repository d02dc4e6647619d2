"""Course progress, certificate and token contracts on an in-memory ledger."""

__version__ = "0.1.0"