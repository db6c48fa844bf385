# ens_keys/registry/resolver.py
"""
ENS Keys Registry: Public Resolver

Python interface to the ENS PublicResolver contract's text records.
Only the two calls this package needs are bound: text() and setText().

Requirements:
    pip install web3

Usage:
    resolver = PublicResolver(
        contract_address="0x...",
        rpc_url="https://...",
        private_key="0x...",  # Optional, for write ops
    )

    value = resolver.text(node, "vnd.umbra-v0-signature")
    tx_hash = resolver.set_text(node, "vnd.umbra-v0-signature", signature)

For tests and demos, MockPublicResolver keeps records in memory.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, List, Dict, Any, Tuple, Union

from eth_account import Account
from hexbytes import HexBytes
from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from ..config import ResolverConfig
from ..constants import ENS_PUBLIC_RESOLVER
from ..exceptions import ConfigError, WriteNotAllowedError, TransactionFailedError


logger = logging.getLogger("ens-keys.resolver")


# =============================================================================
# Constants
# =============================================================================

ABI_PATH = Path(__file__).parent / "abi" / "PublicResolver.json"

def _load_abi() -> List[Dict]:
    """Load contract ABI from JSON file."""
    with open(ABI_PATH) as f:
        data = json.load(f)
        return data.get("abi", data)

CONTRACT_ABI = _load_abi()


Node = Union[str, bytes]


def _node_bytes(node: Node) -> HexBytes:
    value = HexBytes(node)
    if len(value) != 32:
        raise ValueError(f"node must be 32 bytes, got {len(value)}")
    return value


# =============================================================================
# Interface
# =============================================================================

class TextResolver(ABC):
    """
    Text-record transport.

    Anything that can read and write resolver text records keyed by
    (namehash, record key). Unset records read as "".
    """

    @abstractmethod
    def text(self, node: Node, key: str) -> str:
        """Read a text record."""
        pass

    @abstractmethod
    def set_text(self, node: Node, key: str, value: str) -> str:
        """Write a text record, wait for it to be mined, return the tx hash."""
        pass


# =============================================================================
# PublicResolver
# =============================================================================

class PublicResolver(TextResolver):
    """
    PublicResolver contract interface.

    Writes are signed locally when a private key is given, otherwise sent
    from the node's default (unlocked) account.
    """

    def __init__(
        self,
        contract_address: str = ENS_PUBLIC_RESOLVER,
        rpc_url: Optional[str] = None,
        private_key: Optional[str] = None,
        chain_id: Optional[int] = None,
        w3: Optional[Web3] = None,
        gas_limit: Optional[int] = None,
        poa: bool = False,
    ):
        """
        Initialize PublicResolver.

        Args:
            contract_address: Deployed PublicResolver address
            rpc_url: RPC endpoint URL (ignored if w3 is given)
            private_key: Private key for write operations (optional)
            chain_id: Chain ID (fetched on first signed write if not provided)
            w3: Existing Web3 instance to use instead of rpc_url
            gas_limit: Gas limit for setText (estimated by the node if None)
            poa: Inject extra-data middleware for PoA chains
        """
        if w3 is None:
            if not rpc_url:
                raise ConfigError("rpc_url or w3 is required")
            w3 = Web3(Web3.HTTPProvider(rpc_url))

        if poa:
            w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

        self._w3 = w3
        self.contract_address = Web3.to_checksum_address(contract_address)
        self.rpc_url = rpc_url
        self._chain_id = chain_id
        self._gas_limit = gas_limit

        self._contract = self._w3.eth.contract(
            address=self.contract_address,
            abi=CONTRACT_ABI,
        )

        self._account = None
        if private_key:
            self._account = Account.from_key(private_key)

    @classmethod
    def from_config(cls, config: ResolverConfig, w3: Optional[Web3] = None) -> PublicResolver:
        return cls(
            contract_address=config.resolver_address,
            rpc_url=config.rpc_url,
            private_key=config.private_key,
            chain_id=config.chain_id,
            w3=w3,
            gas_limit=config.gas_limit,
            poa=config.poa,
        )

    @property
    def w3(self) -> Web3:
        return self._w3

    @property
    def account_address(self) -> Optional[str]:
        """Get account address (if private key provided)."""
        return self._account.address if self._account else None

    @property
    def chain_id(self) -> int:
        if self._chain_id is None:
            self._chain_id = self._w3.eth.chain_id
        return self._chain_id

    # =========================================================================
    # Read
    # =========================================================================

    def text(self, node: Node, key: str) -> str:
        """Read text record `key` of `node` (eth_call)."""
        node_bytes = _node_bytes(node)
        value = self._contract.functions.text(node_bytes, key).call()
        logger.debug(f"text({Web3.to_hex(node_bytes)}, {key}) -> {len(value)} chars")
        return value

    # =========================================================================
    # Write
    # =========================================================================

    def set_text(self, node: Node, key: str, value: str) -> str:
        """
        Set text record `key` of `node`.

        Returns:
            tx_hash: Transaction hash (0x hex)

        Raises:
            WriteNotAllowedError: No private key and no node account
            TransactionFailedError: Transaction reverted
        """
        call = self._contract.functions.setText(_node_bytes(node), key, value)

        if self._account:
            tx = call.build_transaction(self._with_gas({
                'from': self._account.address,
                'chainId': self.chain_id,
                'nonce': self._w3.eth.get_transaction_count(self._account.address, 'pending'),
                'gasPrice': self._w3.eth.gas_price,
            }))
            signed = self._account.sign_transaction(tx)
            tx_hash = self._w3.eth.send_raw_transaction(signed.raw_transaction)
        else:
            tx_hash = call.transact(self._with_gas({
                'from': self._default_sender(),
            }))

        tx_hash_hex = Web3.to_hex(tx_hash)
        logger.info(f"setText({key}) sent: {tx_hash_hex}")

        receipt = self._w3.eth.wait_for_transaction_receipt(tx_hash)
        if receipt['status'] != 1:
            raise TransactionFailedError(tx_hash_hex, dict(receipt))

        logger.info(f"setText({key}) mined in block {receipt.get('blockNumber')}")
        return tx_hash_hex

    def _with_gas(self, params: Dict[str, Any]) -> Dict[str, Any]:
        # No gas key lets web3 run eth_estimateGas
        if self._gas_limit is not None:
            params['gas'] = self._gas_limit
        return params

    def _default_sender(self) -> str:
        default = self._w3.eth.default_account
        if isinstance(default, str) and Web3.is_address(default):
            return default
        accounts = self._w3.eth.accounts
        if not accounts:
            raise WriteNotAllowedError()
        return accounts[0]


# =============================================================================
# Mock PublicResolver (for testing without blockchain)
# =============================================================================

class MockPublicResolver(TextResolver):
    """
    In-memory PublicResolver for testing.

    No blockchain required - stores records in memory.
    """

    def __init__(self, records: Optional[Dict[Tuple[str, str], str]] = None):
        self._records: Dict[Tuple[str, str], str] = {}
        self._tx_count = 0
        self.calls: List[Tuple[str, Any]] = []
        for (node, key), value in (records or {}).items():
            self._records[(Web3.to_hex(_node_bytes(node)), key)] = value

    def text(self, node: Node, key: str) -> str:
        """Read a record ("" if unset)."""
        node_hex = Web3.to_hex(_node_bytes(node))
        self.calls.append(("text", (node_hex, key)))
        return self._records.get((node_hex, key), "")

    def set_text(self, node: Node, key: str, value: str) -> str:
        """Write a record and return a mock tx hash."""
        node_hex = Web3.to_hex(_node_bytes(node))
        self.calls.append(("setText", (node_hex, key, value)))
        self._records[(node_hex, key)] = value
        self._tx_count += 1
        return Web3.to_hex(Web3.keccak(text=f"{self._tx_count}:{node_hex}:{key}:{value}"))

    @property
    def records(self) -> Dict[Tuple[str, str], str]:
        return dict(self._records)
