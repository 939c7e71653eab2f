import json

from eth_account import Account
from web3 import (
    EthereumTesterProvider,
    Web3,
)

from eth_deployer.artifact import (
    ContractArtifact,
)

import pytest

# runtime code returns 42, creation code copies it and ignores the
# constructor arguments appended after it
RUNTIME_CODE = "0x602a60005260206000f3"
CREATION_CODE = "0x600a600c600039600a6000f3" + RUNTIME_CODE[2:]

SUPPLY_ABI = [
    {
        "type": "constructor",
        "stateMutability": "nonpayable",
        "inputs": [{"name": "initialSupply", "type": "uint256"}],
    },
]


@pytest.fixture(scope="session")
def w3():
    return Web3(EthereumTesterProvider())


@pytest.fixture(scope="session")
def deployer_acct(w3):
    acct = Account.create()
    tx_hash = w3.eth.send_transaction({
        'from': w3.eth.accounts[0],
        'to': acct.address,
        'value': w3.to_wei(10, 'ether'),
    })
    w3.eth.wait_for_transaction_receipt(tx_hash)
    return acct


@pytest.fixture(scope="session")
def token_artifact():
    return ContractArtifact("Token", SUPPLY_ABI, CREATION_CODE)


@pytest.fixture(scope="session")
def plain_artifact():
    return ContractArtifact("Answer", [], CREATION_CODE)


@pytest.fixture
def config_path(tmp_path):
    config_data = {
        'networks': {
            'eth-local': {
                'ip': 'http://localhost:8545',
                'isPOA': False,
                'gas_price': 10,
                'gas_limit': 300000,
                'contracts': {},
            },
        },
        'wallet-eth': {
            'default': {
                'addr': '0x' + '11' * 20,
                'keystore': str(tmp_path / 'keystore.json'),
            },
        },
    }
    path = tmp_path / 'config.json'
    with open(path, "w") as f:
        json.dump(config_data, f, indent=4, sort_keys=True)
    return str(path)


@pytest.fixture
def artifact_path(tmp_path):
    path = tmp_path / 'Token.json'
    with open(path, "w") as f:
        json.dump({
            'contractName': 'Token',
            'abi': SUPPLY_ABI,
            'bytecode': CREATION_CODE,
        }, f)
    return str(path)
