import argparse
from typing import (
    Any,
    List,
)

from pyfiglet import Figlet

from eth_deployer.artifact import (
    ContractArtifact,
)
from eth_deployer.deployer import (
    Deployer,
    DeploymentResult,
)
from eth_deployer.deployer_config import (
    DeployerConfig,
)
import logging

logger = logging.getLogger(__name__)


def deploy_contract(
    config_path: str,
    artifact_path: str,
    network_name: str,
    *args,
    privkey_name: str = 'default',
    privkey_pwd: str = None,
) -> DeploymentResult:
    """ Deploy a compiled contract on network_name and store its address
    in the config file.
    """
    config = DeployerConfig(config_path)
    artifact = ContractArtifact.from_json(artifact_path)

    w3 = config.get_web3(network_name)
    signer_acct = config.get_signer(w3, privkey_name, privkey_pwd)
    logger.info("Sender Address: %s", signer_acct.address)

    deployer = Deployer(
        signer_acct, w3, overrides=config.get_overrides(network_name))
    result = deployer.deploy(artifact, *args)

    config.store_contract_address(network_name, artifact.name, result.address)
    config.save_config()
    logger.info("Stored %s address in %s", artifact.name, config_path)
    return result


def parse_constructor_args(raw_args: List[str]) -> List[Any]:
    """ Command line arguments are strings, convert decimal numbers
    and booleans.
    """
    args = []
    for arg in raw_args:
        try:
            args.append(int(arg))
        except ValueError:
            if arg.lower() in ('true', 'false'):
                args.append(arg.lower() == 'true')
            else:
                args.append(arg)
    return args


def main(argv: List[str] = None) -> None:
    f = Figlet(font='speed')
    print(f.renderText('Contract Deployer'))
    parser = argparse.ArgumentParser(
        description='Deploy a compiled contract to an Ethereum network.')
    # Add arguments
    parser.add_argument(
        '-c', '--config_file_path', type=str, help='Path to config.json',
        required=True)
    parser.add_argument(
        '-n', '--network', type=str, required=True,
        help='Name of Ethereum network in config file')
    parser.add_argument(
        '-a', '--artifact', type=str, required=True,
        help='Path to the compiled contract json (truffle, hardhat, solc)')
    parser.add_argument(
        '--privkey_name', type=str, default='default',
        help='Name of account in config file to sign the deployment',
        required=False)
    parser.add_argument(
        '--local_test', dest='local_test', action='store_true',
        help='Deploy with the test keystore password')
    parser.add_argument(
        'constructor_args', nargs='*',
        help='Arguments passed to the contract constructor')
    parser.set_defaults(local_test=False)

    args = parser.parse_args(argv)
    constructor_args = parse_constructor_args(args.constructor_args)

    privkey_pwd = None
    if args.local_test:
        privkey_pwd = '1234'
    deploy_contract(
        args.config_file_path, args.artifact, args.network,
        *constructor_args, privkey_name=args.privkey_name,
        privkey_pwd=privkey_pwd
    )


if __name__ == '__main__':
    main()
