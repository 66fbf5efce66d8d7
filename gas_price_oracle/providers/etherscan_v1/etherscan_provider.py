from pathlib import Path
from typing import Optional

import ujson
from pydantic import ValidationError

from gas_price_oracle.models.gas_models import GasPrice, GasPriceLevel
from gas_price_oracle.models.network import EthereumNetwork
from gas_price_oracle.models.provider_response_models import (
    EtherscanGasOracleResponse,
    EtherscanGasOracleResult,
)
from gas_price_oracle.providers.base_provider import BaseGasStationProvider
from gas_price_oracle.services.fee_levels import derive_asap_level
from gas_price_oracle.utils.errors import OracleReportedError, ParseResponseError

with open(Path(__file__).parent / 'config.json') as f:
    _PROVIDER_CONFIG = ujson.load(f)

# Note this API is rate limited if no API key is passed, we allow callers to pass theirs
# More info at https://docs.etherscan.io/support/rate-limits
GAS_STATION_URL_BY_NETWORK = {
    EthereumNetwork(network): url
    for network, url in _PROVIDER_CONFIG['gas_station_url_by_network'].items()
}

DEFAULT_FALLBACK_GAS_PRICE = 80


class EtherscanProviderV1(BaseGasStationProvider):
    """
    Etherscan gas tracker. Docs: https://docs.etherscan.io/api-endpoints/gas-tracker#get-gas-oracle

    Etherscan reports total gas prices per level, so the priority fee of a level
    is its gas price minus the suggested base fee.
    """

    PROVIDER_NAME = _PROVIDER_CONFIG['name']
    GAS_STATION_URL_BY_NETWORK = GAS_STATION_URL_BY_NETWORK
    DEFAULT_FALLBACK_GAS_PRICE = DEFAULT_FALLBACK_GAS_PRICE

    def _build_url(self, network: EthereumNetwork, api_key: Optional[str] = None) -> str:
        url = self.GAS_STATION_URL_BY_NETWORK[EthereumNetwork(network)]
        if api_key is not None:
            return f'{url}&apiKey={api_key}'
        return url

    def _convert_response(self, response: dict) -> GasPrice:
        try:
            oracle_response = EtherscanGasOracleResponse.model_validate(response)
        except ValidationError as e:
            raise self.handle_exception(e, response=response)

        if oracle_response.is_error:
            raise OracleReportedError(
                self.PROVIDER_NAME, str(oracle_response.result), oracle_message=oracle_response.message
            )
        result = oracle_response.result
        if not isinstance(result, EtherscanGasOracleResult):
            raise ParseResponseError(
                self.PROVIDER_NAME, f'Unexpected result: {result}', response=response
            )

        base_fee = result.suggest_base_fee
        low = GasPriceLevel(
            max_priority_fee_per_gas=result.safe_gas_price - base_fee,
            max_fee_per_gas=result.safe_gas_price,
        )
        average = GasPriceLevel(
            max_priority_fee_per_gas=result.propose_gas_price - base_fee,
            max_fee_per_gas=result.propose_gas_price,
        )
        high = GasPriceLevel(
            max_priority_fee_per_gas=result.fast_gas_price - base_fee,
            max_fee_per_gas=result.fast_gas_price,
        )
        return GasPrice(
            last_block=result.last_block,
            low=low,
            average=average,
            high=high,
            asap=derive_asap_level(base_fee, high.max_priority_fee_per_gas),
        )
