# ens_keys/__init__.py
"""
ENS Keys: Public Keys via ENS Text Records

Resolve an ENS domain to the public key its owner published, and publish
your own.

- A user signs a fixed message (SIGNED_MESSAGE) with their wallet
- The signature is stored in the domain's "vnd.umbra-v0-signature" text record
- Anyone can recover the public key from that signature
- An optional "vnd.umbra-v0-bytecode" record carries associated bytecode

Architecture:
    ens_keys
    ├── constants.py      # Record keys, resolver address, message
    ├── config.py         # ResolverConfig (args / environment)
    ├── exceptions.py     # RegistryError hierarchy
    ├── crypto/
    │   └── signatures.py # Public key recovery
    └── registry/
        ├── namehash.py   # ENS normalization + namehash
        ├── resolver.py   # PublicResolver (web3), MockPublicResolver
        └── records.py    # get_/set_ signature, bytecode, public key
"""

__version__ = "0.1.0"

from .constants import (
    KEY_SIGNATURE,
    KEY_BYTECODE,
    ENS_PUBLIC_RESOLVER,
    SIGNED_MESSAGE,
)

from .config import ResolverConfig

from .exceptions import (
    RegistryError,
    ConfigError,
    WriteNotAllowedError,
    TransactionFailedError,
    InvalidSignatureError,
)

from .crypto import (
    hash_message,
    get_public_key_from_signature,
    public_key_to_address,
)

from .registry import (
    normalize_name,
    namehash,
    TextResolver,
    PublicResolver,
    MockPublicResolver,
    get_signature,
    get_public_key,
    get_bytecode,
    set_signature,
    set_bytecode,
)

__all__ = [
    "__version__",
    # Constants
    "KEY_SIGNATURE",
    "KEY_BYTECODE",
    "ENS_PUBLIC_RESOLVER",
    "SIGNED_MESSAGE",
    # Config
    "ResolverConfig",
    # Exceptions
    "RegistryError",
    "ConfigError",
    "WriteNotAllowedError",
    "TransactionFailedError",
    "InvalidSignatureError",
    # Crypto
    "hash_message",
    "get_public_key_from_signature",
    "public_key_to_address",
    # Registry
    "normalize_name",
    "namehash",
    "TextResolver",
    "PublicResolver",
    "MockPublicResolver",
    "get_signature",
    "get_public_key",
    "get_bytecode",
    "set_signature",
    "set_bytecode",
]
