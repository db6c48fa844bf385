# tests/test_resolver.py
"""
ENS Keys: PublicResolver Tests

The web3 binding is exercised against a mocked Web3 instance; no RPC
endpoint is needed.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from eth_account import Account
from hexbytes import HexBytes
from web3 import Web3

from ens_keys.config import ResolverConfig
from ens_keys.constants import ENS_PUBLIC_RESOLVER, KEY_SIGNATURE
from ens_keys.exceptions import ConfigError, TransactionFailedError, WriteNotAllowedError
from ens_keys.registry import PublicResolver, MockPublicResolver, namehash, get_signature

from _runner import run_module_tests


PRIVATE_KEY = "0x" + "5e" * 32
NODE_ACCOUNT = "0x" + "12" * 20
TX_HASH = HexBytes(b"\x11" * 32)
NODE = namehash("alice.eth")


# =============================================================================
# Test Utilities
# =============================================================================

def make_w3(status: int = 1) -> MagicMock:
    w3 = MagicMock()
    w3.eth.chain_id = 1
    w3.eth.gas_price = 10
    w3.eth.get_transaction_count.return_value = 3
    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = {"status": status, "blockNumber": 7}
    w3.eth.default_account = None
    w3.eth.accounts = [NODE_ACCOUNT]

    contract = w3.eth.contract.return_value
    contract.functions.text.return_value.call.return_value = "0xsig"
    contract.functions.setText.return_value.build_transaction.return_value = {
        "to": Web3.to_checksum_address(ENS_PUBLIC_RESOLVER),
        "data": "0x",
        "value": 0,
        "gas": 100000,
        "gasPrice": 10,
        "nonce": 3,
        "chainId": 1,
    }
    contract.functions.setText.return_value.transact.return_value = TX_HASH
    return w3


def contract_of(w3: MagicMock) -> MagicMock:
    return w3.eth.contract.return_value


# =============================================================================
# Construction
# =============================================================================

def test_requires_rpc_or_w3():
    with pytest.raises(ConfigError):
        PublicResolver()


def test_binds_checksummed_address():
    w3 = make_w3()
    resolver = PublicResolver(ENS_PUBLIC_RESOLVER.lower(), w3=w3)
    assert resolver.contract_address == Web3.to_checksum_address(ENS_PUBLIC_RESOLVER)
    assert w3.eth.contract.call_args.kwargs["address"] == resolver.contract_address


def test_from_config():
    w3 = make_w3()
    config = ResolverConfig(rpc_url="http://localhost:8545", private_key=PRIVATE_KEY, chain_id=5)
    resolver = PublicResolver.from_config(config, w3=w3)
    assert resolver.account_address == Account.from_key(PRIVATE_KEY).address
    assert resolver.chain_id == 5
    assert resolver.rpc_url == "http://localhost:8545"


def test_poa_middleware_injected():
    w3 = make_w3()
    PublicResolver(w3=w3, poa=True)
    assert w3.middleware_onion.inject.called


# =============================================================================
# Read
# =============================================================================

def test_text_calls_contract():
    w3 = make_w3()
    resolver = PublicResolver(w3=w3)

    assert resolver.text(NODE, KEY_SIGNATURE) == "0xsig"
    contract_of(w3).functions.text.assert_called_once_with(HexBytes(NODE), KEY_SIGNATURE)


def test_text_accepts_bytes_node():
    w3 = make_w3()
    resolver = PublicResolver(w3=w3)

    assert resolver.text(bytes.fromhex(NODE[2:]), KEY_SIGNATURE) == "0xsig"
    contract_of(w3).functions.text.assert_called_once_with(HexBytes(NODE), KEY_SIGNATURE)


def test_text_rejects_short_node():
    resolver = PublicResolver(w3=make_w3())
    with pytest.raises(ValueError):
        resolver.text("0x1234", KEY_SIGNATURE)


def test_get_signature_through_contract():
    w3 = make_w3()
    assert get_signature("Alice.eth", PublicResolver(w3=w3)) == "0xsig"


def test_empty_record_is_absent():
    w3 = make_w3()
    contract_of(w3).functions.text.return_value.call.return_value = ""
    assert get_signature("alice.eth", PublicResolver(w3=w3)) is None


def test_transport_errors_propagate():
    w3 = make_w3()
    contract_of(w3).functions.text.return_value.call.side_effect = ConnectionError("down")
    with pytest.raises(ConnectionError):
        get_signature("alice.eth", PublicResolver(w3=w3))


# =============================================================================
# Write
# =============================================================================

def test_set_text_signed_locally():
    w3 = make_w3()
    resolver = PublicResolver(w3=w3, private_key=PRIVATE_KEY)

    tx_hash = resolver.set_text(NODE, KEY_SIGNATURE, "0xsig")

    assert tx_hash == "0x" + "11" * 32
    build = contract_of(w3).functions.setText.return_value.build_transaction
    params = build.call_args.args[0]
    assert params["from"] == resolver.account_address
    assert params["nonce"] == 3
    assert params["chainId"] == 1

    signed = Account.from_key(PRIVATE_KEY).sign_transaction(build.return_value)
    w3.eth.send_raw_transaction.assert_called_once_with(signed.raw_transaction)
    w3.eth.wait_for_transaction_receipt.assert_called_once_with(TX_HASH)


def test_set_text_from_node_account():
    w3 = make_w3()
    resolver = PublicResolver(w3=w3)

    assert resolver.set_text(NODE, KEY_SIGNATURE, "0xsig") == "0x" + "11" * 32
    transact = contract_of(w3).functions.setText.return_value.transact
    assert transact.call_args.args[0]["from"] == NODE_ACCOUNT
    assert not w3.eth.send_raw_transaction.called


def test_gas_estimated_by_default():
    w3 = make_w3()
    PublicResolver(w3=w3, private_key=PRIVATE_KEY).set_text(NODE, KEY_SIGNATURE, "0xsig")
    PublicResolver(w3=w3).set_text(NODE, KEY_SIGNATURE, "0xsig")

    set_text_call = contract_of(w3).functions.setText.return_value
    assert "gas" not in set_text_call.build_transaction.call_args.args[0]
    assert "gas" not in set_text_call.transact.call_args.args[0]


def test_gas_limit_override():
    w3 = make_w3()
    PublicResolver(w3=w3, private_key=PRIVATE_KEY, gas_limit=250000).set_text(NODE, KEY_SIGNATURE, "0xsig")
    PublicResolver(w3=w3, gas_limit=260000).set_text(NODE, KEY_SIGNATURE, "0xsig")

    set_text_call = contract_of(w3).functions.setText.return_value
    assert set_text_call.build_transaction.call_args.args[0]["gas"] == 250000
    assert set_text_call.transact.call_args.args[0]["gas"] == 260000


def test_gas_limit_from_config():
    w3 = make_w3()
    config = ResolverConfig(rpc_url="http://node", gas_limit=300000)
    PublicResolver.from_config(config, w3=w3).set_text(NODE, KEY_SIGNATURE, "0xsig")

    transact = contract_of(w3).functions.setText.return_value.transact
    assert transact.call_args.args[0]["gas"] == 300000


def test_set_text_without_account():
    w3 = make_w3()
    w3.eth.accounts = []
    with pytest.raises(WriteNotAllowedError):
        PublicResolver(w3=w3).set_text(NODE, KEY_SIGNATURE, "0xsig")


def test_set_text_reverted():
    w3 = make_w3(status=0)
    resolver = PublicResolver(w3=w3, private_key=PRIVATE_KEY)
    with pytest.raises(TransactionFailedError) as exc:
        resolver.set_text(NODE, KEY_SIGNATURE, "0xsig")
    assert exc.value.tx_hash == "0x" + "11" * 32


# =============================================================================
# Mock
# =============================================================================

def test_mock_accepts_bytes_and_hex_nodes():
    resolver = MockPublicResolver()
    resolver.set_text(bytes.fromhex(NODE[2:]), KEY_SIGNATURE, "0xsig")
    assert resolver.text(NODE, KEY_SIGNATURE) == "0xsig"
    assert resolver.text(NODE.upper().replace("0X", "0x"), KEY_SIGNATURE) == "0xsig"


def run_tests() -> bool:
    """Run all tests in this module."""
    return run_module_tests("ENS KEYS: PUBLICRESOLVER TESTS", globals())


if __name__ == "__main__":
    run_tests()
