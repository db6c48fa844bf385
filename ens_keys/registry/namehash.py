# ens_keys/registry/namehash.py
"""
ENS Keys Registry: Namehash

EIP-137 namehash of ENSIP-15 normalized names, via the `ens` module that
ships with web3.py.

    namehash("")        = 0x00...00
    namehash("eth")     = keccak256(namehash("") + keccak256("eth"))
    namehash("a.eth")   = keccak256(namehash("eth") + keccak256("a"))
"""

from __future__ import annotations

from ens.utils import normalize_name as _ens_normalize, normal_name_to_hash
from web3 import Web3


def normalize_name(name: str) -> str:
    """
    Normalize an ENS name (lowercase, ENSIP-15).

    Raises:
        ens.exceptions.InvalidName: If the name cannot be normalized
    """
    return _ens_normalize(name)


def namehash(name: str) -> str:
    """
    Compute the namehash of an ENS domain, e.g. myname.eth.

    Capitalization and other normalizable differences map to the same hash.

    Returns:
        32-byte namehash as a 0x-prefixed hex string
    """
    return Web3.to_hex(normal_name_to_hash(normalize_name(name)))
