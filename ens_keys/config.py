# ens_keys/config.py
"""
ENS Keys: Resolver Configuration

Connection settings for PublicResolver. Either build one directly or
read it from the environment:

    ENS_KEYS_RPC_URL            RPC endpoint (required)
    ENS_KEYS_RESOLVER_ADDRESS   Public Resolver address (default: mainnet)
    ENS_KEYS_PRIVATE_KEY        Key used to sign writes (optional)
    ENS_KEYS_CHAIN_ID           Chain ID (auto-detected if unset)
    ENS_KEYS_GAS_LIMIT          Gas limit for writes (estimated if unset)
    ENS_KEYS_POA                "1"/"true" to inject the PoA middleware

Usage:
    config = ResolverConfig.from_env()
    resolver = PublicResolver.from_config(config)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import ENS_PUBLIC_RESOLVER
from .exceptions import ConfigError


ENV_PREFIX = "ENS_KEYS_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class ResolverConfig:
    """
    Public Resolver connection settings.

    Attributes:
        rpc_url: RPC endpoint URL
        resolver_address: Public Resolver contract address
        private_key: Hex private key for write operations (optional)
        chain_id: Chain ID (auto-detected if None)
        gas_limit: Gas limit for setText (None = estimated by the node)
        poa: Inject extra-data (PoA) middleware, for chains like Polygon
    """
    rpc_url: str
    resolver_address: str = ENS_PUBLIC_RESOLVER
    private_key: Optional[str] = None
    chain_id: Optional[int] = None
    gas_limit: Optional[int] = None
    poa: bool = False

    def __repr__(self) -> str:
        key = "***" if self.private_key else None
        return (
            f"ResolverConfig(rpc_url={self.rpc_url!r}, "
            f"resolver_address={self.resolver_address!r}, private_key={key!r}, "
            f"chain_id={self.chain_id!r}, gas_limit={self.gas_limit!r}, "
            f"poa={self.poa!r})"
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        prefix: str = ENV_PREFIX,
    ) -> ResolverConfig:
        """
        Build config from environment variables.

        Raises:
            ConfigError: If RPC_URL is missing or a numeric value is malformed
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            value = env.get(prefix + name)
            if value is None or value.strip() == "":
                return None
            return value.strip()

        rpc_url = get("RPC_URL")
        if rpc_url is None:
            raise ConfigError(f"{prefix}RPC_URL is not set")

        return cls(
            rpc_url=rpc_url,
            resolver_address=get("RESOLVER_ADDRESS") or ENS_PUBLIC_RESOLVER,
            private_key=get("PRIVATE_KEY"),
            chain_id=_parse_int(get("CHAIN_ID"), prefix + "CHAIN_ID"),
            gas_limit=_parse_int(get("GAS_LIMIT"), prefix + "GAS_LIMIT"),
            poa=(get("POA") or "").lower() in _TRUE_VALUES,
        )


def _parse_int(value: Optional[str], name: str) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value, 0)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}")
