# ens_keys/crypto/signatures.py
"""
ENS Keys Crypto: Public Key Recovery

Recovers the secp256k1 public key of whoever produced a personal_sign
(EIP-191) signature over SIGNED_MESSAGE.

Requirements:
    pip install eth-account eth-keys

Usage:
    from ens_keys.crypto import get_public_key_from_signature

    public_key = get_public_key_from_signature(signature)
    # '0x04' + 128 hex chars
"""

from __future__ import annotations

from typing import Union

from eth_account.messages import defunct_hash_message
from eth_keys import keys
from eth_keys.exceptions import BadSignature, ValidationError
from hexbytes import HexBytes

from ..constants import SIGNED_MESSAGE, SIGNATURE_BYTES, PUBLIC_KEY_BYTES
from ..exceptions import InvalidSignatureError


# Uncompressed SEC1 prefix
UNCOMPRESSED_PREFIX = b"\x04"


def hash_message(message: Union[str, bytes] = SIGNED_MESSAGE) -> bytes:
    """
    EIP-191 personal message hash.

    keccak256("\\x19Ethereum Signed Message:\\n" + len(message) + message)
    """
    if isinstance(message, str):
        return bytes(defunct_hash_message(text=message))
    return bytes(defunct_hash_message(primitive=message))


def _to_signature(signature: Union[str, bytes]) -> keys.Signature:
    try:
        raw = bytes(HexBytes(signature))
    except (TypeError, ValueError) as e:
        raise InvalidSignatureError(f"not hex: {e}")

    if len(raw) != SIGNATURE_BYTES:
        raise InvalidSignatureError(
            f"expected {SIGNATURE_BYTES} bytes, got {len(raw)}"
        )

    r = int.from_bytes(raw[0:32], "big")
    s = int.from_bytes(raw[32:64], "big")
    v = raw[64]

    # Wallets emit 27/28, eth_keys wants 0/1
    if v >= 27:
        v -= 27
    if v not in (0, 1):
        raise InvalidSignatureError(f"bad recovery id: {raw[64]}")

    try:
        return keys.Signature(vrs=(v, r, s))
    except (BadSignature, ValidationError) as e:
        raise InvalidSignatureError(str(e))


def get_public_key_from_signature(
    signature: Union[str, bytes],
    message: Union[str, bytes] = SIGNED_MESSAGE,
) -> str:
    """
    Recover the uncompressed public key from a signature.

    Args:
        signature: 65-byte signature (r || s || v), hex string or bytes
        message: Message that was signed (default: SIGNED_MESSAGE)

    Returns:
        Public key as '0x04' + 64-byte hex

    Raises:
        InvalidSignatureError: If the signature is malformed or unrecoverable
    """
    sig = _to_signature(signature)
    try:
        public_key = sig.recover_public_key_from_msg_hash(hash_message(message))
    except (BadSignature, ValidationError) as e:
        raise InvalidSignatureError(str(e))
    return "0x" + (UNCOMPRESSED_PREFIX + public_key.to_bytes()).hex()


def public_key_to_address(public_key: Union[str, bytes]) -> str:
    """Checksummed address of a public key (with or without the 0x04 prefix)."""
    raw = bytes(HexBytes(public_key))
    if len(raw) == PUBLIC_KEY_BYTES + 1 and raw[:1] == UNCOMPRESSED_PREFIX:
        raw = raw[1:]
    if len(raw) != PUBLIC_KEY_BYTES:
        raise ValueError(f"expected {PUBLIC_KEY_BYTES}-byte public key, got {len(raw)}")
    return keys.PublicKey(raw).to_checksum_address()
