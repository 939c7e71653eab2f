from typing import (
    Dict,
    NamedTuple,
    Optional,
)


class DeploymentOverrides(NamedTuple):
    """ Default gas settings applied to every deploy transaction.
    gas_price is in wei and gas_limit in gas units. Values that are None
    or not greater than 0 leave the value computed by web3 untouched.
    """
    gas_price: Optional[int] = None
    gas_limit: Optional[int] = None

    @classmethod
    def create(cls, gas_price: int = None, gas_limit: int = None):
        for field, value in (('gas_price', gas_price),
                             ('gas_limit', gas_limit)):
            if value is not None and value < 0:
                raise ValueError(
                    "{} override must be >= 0, got {}".format(field, value)
                )
        return cls(gas_price, gas_limit)

    @classmethod
    def from_mapping(cls, overrides: Dict):
        """ Accept both python (gas_price) and json-rpc (gasPrice) keys."""
        gas_price = overrides.get('gas_price', overrides.get('gasPrice'))
        gas_limit = overrides.get('gas_limit', overrides.get('gasLimit'))
        return cls.create(gas_price, gas_limit)
