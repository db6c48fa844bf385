# ens_keys/registry/records.py
"""
ENS Keys Registry: Records

Read and publish the signature and bytecode text records of an ENS domain.
Each call is one resolver read or one resolver write; a record that was
never set comes back as None.

Usage:
    from ens_keys.registry import PublicResolver, get_public_key, set_signature

    resolver = PublicResolver(rpc_url="https://...", private_key="0x...")

    tx_hash = set_signature("myname.eth", resolver, signature)
    public_key = get_public_key("myname.eth", resolver)
"""

from __future__ import annotations

import logging
from typing import Optional

from ..constants import KEY_SIGNATURE, KEY_BYTECODE
from ..crypto.signatures import get_public_key_from_signature
from .namehash import namehash
from .resolver import TextResolver


logger = logging.getLogger("ens-keys.records")


def _read(name: str, resolver: TextResolver, key: str) -> Optional[str]:
    value = resolver.text(namehash(name), key)
    if not value:
        logger.debug(f"{name}: no {key} record")
        return None
    return value


def get_signature(name: str, resolver: TextResolver) -> Optional[str]:
    """
    For a given ENS domain, return the associated signature, or None if
    none exists.

    Args:
        name: ENS domain, e.g. myname.eth
        resolver: Text-record transport (PublicResolver or MockPublicResolver)
    """
    return _read(name, resolver, KEY_SIGNATURE)


def get_public_key(name: str, resolver: TextResolver) -> Optional[str]:
    """
    For a given ENS domain, recover the public key from its signature.

    Returns:
        '0x04'-prefixed uncompressed public key, or None if no signature is set
    """
    signature = get_signature(name, resolver)
    if signature is None:
        return None
    return get_public_key_from_signature(signature)


def get_bytecode(name: str, resolver: TextResolver) -> Optional[str]:
    """
    For a given ENS domain, return the associated bytecode, or None if
    none exists.
    """
    return _read(name, resolver, KEY_BYTECODE)


def set_signature(name: str, resolver: TextResolver, signature: str) -> str:
    """
    For a given ENS domain, set the associated signature.

    Args:
        name: ENS domain, e.g. myname.eth
        resolver: Text-record transport able to sign writes
        signature: Signature of SIGNED_MESSAGE, as hex string

    Returns:
        Transaction hash
    """
    tx_hash = resolver.set_text(namehash(name), KEY_SIGNATURE, signature)
    logger.info(f"{name}: signature published in {tx_hash}")
    return tx_hash


def set_bytecode(name: str, resolver: TextResolver, bytecode: str) -> str:
    """For a given ENS domain, set the associated bytecode. Returns the tx hash."""
    tx_hash = resolver.set_text(namehash(name), KEY_BYTECODE, bytecode)
    logger.info(f"{name}: bytecode published in {tx_hash}")
    return tx_hash
