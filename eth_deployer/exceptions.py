class DeployerError(Exception):
    """ Base class of the errors raised while deploying a contract."""
    pass


class InvalidIdentityError(DeployerError):
    """ Exception raised when the deployer is given a signer that is not a
    local eth_account account.
    """
    pass


class InvalidArtifactError(DeployerError):
    """ Exception raised when a compiled contract artifact doesn't contain
    a usable abi and bytecode.
    """
    pass


class InvalidArgumentsError(DeployerError):
    """ Exception raised when a config entry or a command line argument
    is missing or malformed.
    """
    pass


class EncodingError(DeployerError):
    """ Exception raised when constructor arguments don't match the
    constructor declared in the contract abi.
    """
    pass


class SubmissionError(DeployerError):
    """ Exception raised when the node rejects the deploy transaction
    (nonce conflict, insufficient funds...).
    """
    pass


class DeploymentTimeoutError(DeployerError, TimeoutError):
    """ Exception raised when the deploy transaction is not included in a
    block before the client stops waiting.
    """
    pass


class DeploymentRevertedError(DeployerError):
    """ Exception raised when the deploy transaction was mined but its
    execution failed.
    """

    def __init__(self, tx_hash: str) -> None:
        self.tx_hash = tx_hash
        super().__init__(
            "Transaction {} failed. Please check a block explorer for "
            "the revert reason.".format(tx_hash)
        )
