from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GasPriceLevel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    max_priority_fee_per_gas: float = Field(alias='maxPriorityFeePerGas')
    max_fee_per_gas: float = Field(alias='maxFeePerGas')


class GasPrice(BaseModel):
    """
    Gas price recommendation for one network, same shape for every chain.
    Fees are in the chain's native fee unit, usually gwei.
    `last_block` is None when the upstream gas station could not be used
    and all levels hold the fallback gas price.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    last_block: Optional[int] = Field(None, alias='LastBlock')
    low: GasPriceLevel
    average: GasPriceLevel
    high: GasPriceLevel
    asap: GasPriceLevel

    @classmethod
    def from_fallback(cls, gas_price: float) -> 'GasPrice':
        level = GasPriceLevel(max_priority_fee_per_gas=gas_price, max_fee_per_gas=gas_price)
        return cls(last_block=None, low=level, average=level, high=level, asap=level)
