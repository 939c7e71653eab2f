from collections.abc import (
    Mapping,
)
from typing import (
    Any,
    Callable,
    Dict,
    NamedTuple,
    Optional,
    Sequence,
    Union,
)

from eth_account.signers.local import (
    LocalAccount,
)
from eth_utils import (
    ValidationError as EthUtilsValidationError,
)
from eth_utils.abi import (
    collapse_if_tuple,
)
from hexbytes import (
    HexBytes,
)
from web3 import (
    Web3,
)
from web3.exceptions import (
    MismatchedABI,
    TimeExhausted,
    Web3RPCError,
    Web3ValidationError,
)
import logging

from eth_deployer.artifact import (
    ContractArtifact,
)
from eth_deployer.exceptions import (
    DeploymentRevertedError,
    DeploymentTimeoutError,
    EncodingError,
    InvalidIdentityError,
    SubmissionError,
)
from eth_deployer.overrides import (
    DeploymentOverrides,
)

logger = logging.getLogger(__name__)

# EIP-1559 fee fields can't be sent along with a legacy gasPrice
DYNAMIC_FEE_FIELDS = ('maxFeePerGas', 'maxPriorityFeePerGas')


class DeploymentResult(NamedTuple):
    contract_name: str
    address: str
    transaction_hash: str
    receipt: Any


class DeploymentSteps(NamedTuple):
    """ Replacement functions for the steps of Deployer.deploy.
    A step left to None keeps the default Deployer behavior.

    pre_validate(artifact, args)
    build_transaction(artifact, args) -> tx
    apply_overrides(tx) -> tx
    submit(tx) -> tx_hash
    await_inclusion(tx_hash)
    fetch_receipt(tx_hash) -> receipt
    post_validate(artifact, tx_hash, receipt)
    produce_result(artifact, tx_hash, receipt) -> DeploymentResult
    """
    pre_validate: Optional[Callable] = None
    build_transaction: Optional[Callable] = None
    apply_overrides: Optional[Callable] = None
    submit: Optional[Callable] = None
    await_inclusion: Optional[Callable] = None
    fetch_receipt: Optional[Callable] = None
    post_validate: Optional[Callable] = None
    produce_result: Optional[Callable] = None


class Deployer():
    """ Deploy contracts to ethereum with a local account.

    Each step of deploy() is a method that can be overridden by a subclass
    or replaced at construction with a DeploymentSteps. The deployer holds
    no state between deployments and can be reused.
    """

    def __init__(
        self,
        account: LocalAccount,
        w3: Web3,
        overrides: Union[DeploymentOverrides, Dict] = None,
        steps: DeploymentSteps = None,
        log: Callable[[str], None] = None,
        timeout: float = 120,
        poll_latency: float = 0.1,
    ) -> None:
        if not isinstance(account, LocalAccount):
            raise InvalidIdentityError(
                "Signer must be an eth_account LocalAccount, got {}"
                .format(type(account).__name__)
            )
        if isinstance(overrides, Mapping):
            overrides = DeploymentOverrides.from_mapping(overrides)
        self.account = account
        self.w3 = w3
        self.overrides = overrides
        self.timeout = timeout
        self.poll_latency = poll_latency
        if log is None:
            log = logger.info
        self.log = log
        if steps is not None:
            for step_name, step in steps._asdict().items():
                if step is not None:
                    setattr(self, '_' + step_name, step)

    def deploy(self, artifact: ContractArtifact, *args) -> DeploymentResult:
        """ Deploy artifact with constructor arguments args and return
        the address of the new contract.
        """
        self._pre_validate(artifact, args)
        tx = self._build_transaction(artifact, args)
        tx = self._apply_overrides(tx)
        tx_hash = self._submit(tx)
        self._await_inclusion(tx_hash)
        receipt = self._fetch_receipt(tx_hash)
        self._post_validate(artifact, tx_hash, receipt)
        return self._produce_result(artifact, tx_hash, receipt)

    def _pre_validate(
        self,
        artifact: ContractArtifact,
        args: Sequence[Any],
    ) -> None:
        message = "Deploying contract: {}".format(artifact.name)
        if len(args) > 0:
            message += " with arguments: {}".format(list(args))
        self.log(message)

    def _build_transaction(
        self,
        artifact: ContractArtifact,
        args: Sequence[Any],
    ) -> Dict:
        inputs = artifact.constructor_inputs
        if len(args) != len(inputs):
            raise EncodingError(
                "{} constructor takes {} arguments, got {}"
                .format(artifact.name, len(inputs), len(args))
            )
        for i, (abi_input, arg) in enumerate(zip(inputs, args)):
            abi_type = collapse_if_tuple(abi_input)
            if not self.w3.codec.is_encodable(abi_type, arg):
                raise EncodingError(
                    "Argument {} ({}) of {} constructor can't be encoded "
                    "as {}".format(
                        i, abi_input.get('name', ''), artifact.name, abi_type)
                )
        contract_ = self.w3.eth.contract(
            abi=artifact.abi,
            bytecode=artifact.bytecode)
        try:
            return contract_.constructor(*args).build_transaction({
                'from': self.account.address,
            })
        except (MismatchedABI, Web3ValidationError, TypeError) as e:
            raise EncodingError(
                "Invalid constructor arguments for {}: {}"
                .format(artifact.name, e)
            ) from e
        # gas estimation asks the node, which rejects unfunded senders
        except (Web3RPCError, EthUtilsValidationError) as e:
            raise SubmissionError(
                "Deploy transaction rejected: {}".format(e)
            ) from e

    def _apply_overrides(self, tx: Dict) -> Dict:
        if self.overrides is None:
            return tx
        tx = dict(tx)
        if self.overrides.gas_price is not None \
                and self.overrides.gas_price > 0:
            for field in DYNAMIC_FEE_FIELDS:
                tx.pop(field, None)
            tx['gasPrice'] = self.overrides.gas_price
        if self.overrides.gas_limit is not None \
                and self.overrides.gas_limit > 0:
            tx['gas'] = self.overrides.gas_limit
        return tx

    def _submit(self, tx: Dict) -> HexBytes:
        tx = dict(tx)
        if 'nonce' not in tx:
            tx['nonce'] = self.w3.eth.get_transaction_count(
                self.account.address, 'pending')
        if 'chainId' not in tx:
            tx['chainId'] = self.w3.eth.chain_id
        signed = self.account.sign_transaction(tx)
        try:
            return self.w3.eth.send_raw_transaction(signed.raw_transaction)
        except (Web3RPCError, EthUtilsValidationError, ValueError) as e:
            raise SubmissionError(
                "Deploy transaction rejected: {}".format(e)
            ) from e

    def _await_inclusion(self, tx_hash: HexBytes) -> None:
        self.log(
            "Waiting for transaction to be included in block and mined: {}"
            .format(Web3.to_hex(tx_hash))
        )
        try:
            self.w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self.timeout, poll_latency=self.poll_latency)
        except TimeExhausted as e:
            raise DeploymentTimeoutError(
                "Transaction {} not mined after {}s"
                .format(Web3.to_hex(tx_hash), self.timeout)
            ) from e

    def _fetch_receipt(self, tx_hash: HexBytes):
        return self.w3.eth.get_transaction_receipt(tx_hash)

    def _post_validate(
        self,
        artifact: ContractArtifact,
        tx_hash: HexBytes,
        receipt,
    ) -> None:
        if receipt.status == 0:
            raise DeploymentRevertedError(
                Web3.to_hex(receipt.transactionHash))

    def _produce_result(
        self,
        artifact: ContractArtifact,
        tx_hash: HexBytes,
        receipt,
    ) -> DeploymentResult:
        self.log(
            "Contract {} deployed at address: {}"
            .format(artifact.name, receipt.contractAddress)
        )
        return DeploymentResult(
            artifact.name, receipt.contractAddress,
            Web3.to_hex(tx_hash), receipt
        )
