import json

from typing import (
    Union,
    List,
    Dict,
)

from eth_account.signers.local import (
    LocalAccount,
)
from web3 import (
    Web3,
)

from eth_deployer.exceptions import (
    InvalidArgumentsError,
)
from eth_deployer.overrides import (
    DeploymentOverrides,
)
from eth_deployer.wallet_utils import (
    connect_web3,
    is_ethereum_address,
    load_signer,
)


class DeployerConfig():
    """ Access networks, accounts and deployed contract addresses
    stored in a json config file.
    """

    def __init__(
        self,
        config_file_path: str,
        config_data: Dict = None,
    ) -> None:
        if config_data is None:
            with open(config_file_path, "r") as f:
                config_data = json.load(f)
        self._config_data = config_data
        self._config_path = config_file_path

    def config_data(
        self,
        *json_path: Union[str, int],
        value: Union[str, int, List, Dict] = None
    ):
        """ Get the value in nested dictionary at the end of
        json path if value is None, or set value at the end of
        the path.
        """
        config_dict = self._config_data
        for key in json_path[:-1]:
            if value is not None:
                config_dict = config_dict.setdefault(key, {})
            else:
                config_dict = config_dict[key]
        if value is not None:
            config_dict[json_path[-1]] = value
        return config_dict[json_path[-1]]

    def save_config(self, path: str = None) -> None:
        if path is None:
            path = self._config_path
        with open(path, "w") as f:
            json.dump(self._config_data, f, indent=4, sort_keys=True)

    def get_network(self, network_name: str) -> Dict:
        try:
            return self.config_data('networks', network_name)
        except KeyError as e:
            raise InvalidArgumentsError(
                "Network {} not found in config file".format(network_name)
            ) from e

    def get_overrides(self, network_name: str) -> DeploymentOverrides:
        """ Gas overrides of network_name, the gas price is stored in gWei"""
        network = self.get_network(network_name)
        gas_price = network.get('gas_price')
        if gas_price is not None:
            gas_price = Web3.to_wei(gas_price, 'gwei')
        return DeploymentOverrides.create(gas_price, network.get('gas_limit'))

    def get_web3(self, network_name: str) -> Web3:
        network = self.get_network(network_name)
        return connect_web3(network['ip'], network.get('isPOA', False))

    def get_signer(
        self,
        w3: Web3,
        privkey_name: str = 'default',
        privkey_pwd: str = None,
    ) -> LocalAccount:
        try:
            keystore = self.config_data('wallet-eth', privkey_name, 'keystore')
        except KeyError as e:
            raise InvalidArgumentsError(
                "Account {} not found in config file".format(privkey_name)
            ) from e
        return load_signer(w3, keystore, privkey_name, privkey_pwd)

    def get_contract_address(
        self,
        network_name: str,
        contract_name: str,
    ) -> str:
        self.get_network(network_name)
        try:
            return self.config_data('networks', network_name, 'contracts',
                                    contract_name, 'addr')
        except KeyError as e:
            raise InvalidArgumentsError(
                "Contract {} not deployed on {}"
                .format(contract_name, network_name)
            ) from e

    def store_contract_address(
        self,
        network_name: str,
        contract_name: str,
        address: str,
    ) -> None:
        self.get_network(network_name)
        if not is_ethereum_address(address):
            raise InvalidArgumentsError(
                "Contract address {} must be an Ethereum address"
                .format(address)
            )
        self.config_data('networks', network_name, 'contracts',
                         contract_name, 'addr', value=address)
