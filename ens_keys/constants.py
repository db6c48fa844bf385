# ens_keys/constants.py
"""
ENS Keys: Constants

Text-record keys, default contract addresses and the message users sign
to publish their public key.
"""

# =============================================================================
# Text Record Keys
# =============================================================================

KEY_SIGNATURE = "vnd.umbra-v0-signature"
KEY_BYTECODE = "vnd.umbra-v0-bytecode"


# =============================================================================
# Contracts
# =============================================================================

# ENS Public Resolver (mainnet)
ENS_PUBLIC_RESOLVER = "0x4976fb03C32e5B8cfe2b6cCB31c09Ba78EBaBa41"


# =============================================================================
# Signed Message
# =============================================================================

# Public keys are recovered from a personal_sign signature of this message
SIGNED_MESSAGE = (
    "This signature associates my public key with my ENS address "
    "for use with Umbra."
)

SIGNATURE_BYTES = 65
PUBLIC_KEY_BYTES = 64
