from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator


class EtherscanGasOracleResult(BaseModel):
    """Numbers come as strings from Etherscan, they are coerced on validation."""

    last_block: Optional[int] = Field(None, alias='LastBlock')
    suggest_base_fee: float = Field(alias='suggestBaseFee')
    safe_gas_price: float = Field(alias='SafeGasPrice')
    propose_gas_price: float = Field(alias='ProposeGasPrice')
    fast_gas_price: float = Field(alias='FastGasPrice')


class EtherscanGasOracleResponse(BaseModel):
    status: Optional[str] = None
    message: Optional[str] = None
    # Holds the error message when status is '0'.
    result: Union[EtherscanGasOracleResult, str]

    @field_validator('status', mode='before')
    @classmethod
    def status_to_str(cls, value):
        return value if value is None else str(value)

    @property
    def is_error(self) -> bool:
        return self.status == '0'


class PolygonFeeLevel(BaseModel):
    max_priority_fee: float = Field(alias='maxPriorityFee')
    max_fee: float = Field(alias='maxFee')


class PolygonGasStationResponse(BaseModel):
    block_number: Optional[int] = Field(None, alias='blockNumber')
    estimated_base_fee: float = Field(alias='estimatedBaseFee')
    safe_low: PolygonFeeLevel = Field(alias='safeLow')
    standard: PolygonFeeLevel
    fast: PolygonFeeLevel
