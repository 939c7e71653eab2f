from getpass import getpass
import re

from eth_account.signers.local import (
    LocalAccount,
)
from web3 import (
    Web3,
)
from web3.middleware import (
    ExtraDataToPOAMiddleware,
)

from eth_deployer.exceptions import (
    InvalidArgumentsError,
)


def is_ethereum_address(address: str):
    if address[:2] != '0x':
        return False
    match = re.match("^[a-fA-F0-9]*$", address[2:])
    if match is None:
        return False
    if len(address) != 42:
        return False
    return True


def connect_web3(ip: str, is_poa: bool = False) -> Web3:
    """ Get a web3 provider to connect to an Ethereum network """
    w3 = Web3(Web3.HTTPProvider(ip))
    if is_poa:
        w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    if not w3.is_connected():
        raise InvalidArgumentsError("Cannot connect to {}".format(ip))
    return w3


def load_signer(
    w3: Web3,
    keystore_path: str,
    privkey_name: str = 'default',
    privkey_pwd: str = None,
) -> LocalAccount:
    """ Decrypt an Ethereum keystore file, prompt for the password if
    it is not provided.
    """
    with open(keystore_path, "r") as f:
        encrypted_key = f.read()
    if privkey_pwd is None:
        privkey_pwd = getpass("Decrypt Ethereum keystore '{}'\nPassword: "
                              .format(privkey_name))
    privkey = w3.eth.account.decrypt(encrypted_key, privkey_pwd)
    return w3.eth.account.from_key(privkey)
