# ens_keys/exceptions.py
"""
ENS Keys: Exceptions

Only errors raised by this package live here. Transport, contract and
name-normalization errors from web3.py propagate unchanged.
"""

from __future__ import annotations

from typing import Optional


class RegistryError(Exception):
    """Base registry error."""
    pass


class ConfigError(RegistryError):
    """Invalid or missing configuration."""
    pass


class WriteNotAllowedError(RegistryError):
    """No account available to sign a write."""
    def __init__(self, reason: str = "no private key and no unlocked account"):
        self.reason = reason
        super().__init__(f"Cannot write to resolver: {reason}")


class TransactionFailedError(RegistryError):
    """Transaction was mined but reverted."""
    def __init__(self, tx_hash: str, receipt: Optional[dict] = None):
        self.tx_hash = tx_hash
        self.receipt = receipt
        super().__init__(f"Transaction failed: {tx_hash}")


class InvalidSignatureError(RegistryError, ValueError):
    """Signature is not a valid 65-byte recoverable signature."""
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid signature: {reason}")
