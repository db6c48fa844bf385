# ens_keys/registry/__init__.py
"""
ENS Keys Registry Layer

Publish and resolve per-domain public keys through ENS text records.

Components:
    namehash: ENS name normalization and hashing
    PublicResolver: Contract interaction layer
    records: Domain -> signature / public key / bytecode

Usage:
    from ens_keys.registry import PublicResolver, get_public_key, set_signature

    resolver = PublicResolver(
        rpc_url="https://...",
        private_key="0x...",  # For write operations
    )

    # Publish
    tx_hash = set_signature("myname.eth", resolver, signature)

    # Resolve
    public_key = get_public_key("myname.eth", resolver)
"""

from .namehash import normalize_name, namehash

from .resolver import (
    TextResolver,
    PublicResolver,
    MockPublicResolver,
)

from .records import (
    get_signature,
    get_public_key,
    get_bytecode,
    set_signature,
    set_bytecode,
)

__all__ = [
    # Namehash
    "normalize_name",
    "namehash",
    # Resolver
    "TextResolver",
    "PublicResolver",
    "MockPublicResolver",
    # Records
    "get_signature",
    "get_public_key",
    "get_bytecode",
    "set_signature",
    "set_bytecode",
]
