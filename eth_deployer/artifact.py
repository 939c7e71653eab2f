import json
import os
from typing import (
    Any,
    Dict,
    List,
    NamedTuple,
    Union,
)

from eth_deployer.exceptions import (
    InvalidArtifactError,
)


class ContractArtifact(NamedTuple):
    """ Compiled contract ready to be deployed: a human readable name,
    the contract abi and the creation bytecode (0x prefixed hex).
    """
    name: str
    abi: List[Dict[str, Any]]
    bytecode: str

    @property
    def constructor_inputs(self) -> List[Dict[str, Any]]:
        for entry in self.abi:
            if entry.get('type') == 'constructor':
                return entry.get('inputs', [])
        return []

    @classmethod
    def from_json(cls, artifact_path: str, name: str = None):
        """ Load the json artifact generated by truffle, hardhat or solc.
        The bytecode can be a hex string or a {"object": hex} mapping.
        """
        with open(artifact_path, "r") as f:
            artifact_data = json.load(f)
        if name is None:
            name = artifact_data.get('contractName')
        if name is None:
            name = os.path.splitext(os.path.basename(artifact_path))[0]
        if 'abi' not in artifact_data or 'bytecode' not in artifact_data:
            raise InvalidArtifactError(
                "Artifact {} must contain an abi and a bytecode"
                .format(artifact_path)
            )
        bytecode = artifact_data['bytecode']
        if isinstance(bytecode, dict):
            bytecode = bytecode.get('object')
        return cls(
            name, _parse_abi(artifact_data['abi']), _parse_bytecode(bytecode))

    @classmethod
    def from_files(cls, name: str, bytecode_path: str, abi_path: str):
        """ Load a contract from separate bytecode and abi text files."""
        with open(bytecode_path, "r") as f:
            bytecode = f.read()
        with open(abi_path, "r") as f:
            abi = f.read()
        return cls(name, _parse_abi(abi), _parse_bytecode(bytecode))


def _parse_abi(abi: Union[str, List]) -> List[Dict[str, Any]]:
    if isinstance(abi, str):
        try:
            abi = json.loads(abi)
        except ValueError as e:
            raise InvalidArtifactError("Abi is not valid json") from e
    if not isinstance(abi, list):
        raise InvalidArtifactError("Abi must be a list of abi entries")
    return abi


def _parse_bytecode(bytecode: str) -> str:
    if not isinstance(bytecode, str):
        raise InvalidArtifactError(
            "Bytecode must be a hex string, got {}".format(bytecode)
        )
    bytecode = bytecode.strip()
    if bytecode[:2] != '0x':
        bytecode = '0x' + bytecode
    try:
        bytes.fromhex(bytecode[2:])
    except ValueError as e:
        raise InvalidArtifactError(
            "Bytecode is not a hex string: {}...".format(bytecode[:12])
        ) from e
    if len(bytecode) == 2:
        raise InvalidArtifactError("Bytecode is empty")
    return bytecode
