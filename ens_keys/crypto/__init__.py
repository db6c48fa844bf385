# ens_keys/crypto/__init__.py
"""
ENS Keys Crypto

Signature helpers for recovering published public keys.
"""

from .signatures import (
    hash_message,
    get_public_key_from_signature,
    public_key_to_address,
)

__all__ = [
    "hash_message",
    "get_public_key_from_signature",
    "public_key_to_address",
]
