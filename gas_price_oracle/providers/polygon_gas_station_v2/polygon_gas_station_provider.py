from pathlib import Path

import ujson
from pydantic import ValidationError

from gas_price_oracle.models.gas_models import GasPrice, GasPriceLevel
from gas_price_oracle.models.network import PolygonNetwork
from gas_price_oracle.models.provider_response_models import (
    PolygonFeeLevel,
    PolygonGasStationResponse,
)
from gas_price_oracle.providers.base_provider import BaseGasStationProvider
from gas_price_oracle.services.fee_levels import derive_asap_level

with open(Path(__file__).parent / 'config.json') as f:
    _PROVIDER_CONFIG = ujson.load(f)

GAS_STATION_URL_BY_NETWORK = {
    PolygonNetwork(network): url
    for network, url in _PROVIDER_CONFIG['gas_station_url_by_network'].items()
}

DEFAULT_FALLBACK_GAS_PRICE = 50


class PolygonGasStationProviderV2(BaseGasStationProvider):
    """Docs: https://docs.polygon.technology/tools/gas/polygon-gas-station/"""

    PROVIDER_NAME = _PROVIDER_CONFIG['name']
    GAS_STATION_URL_BY_NETWORK = GAS_STATION_URL_BY_NETWORK
    DEFAULT_FALLBACK_GAS_PRICE = DEFAULT_FALLBACK_GAS_PRICE

    def _build_url(self, network: PolygonNetwork) -> str:
        return self.GAS_STATION_URL_BY_NETWORK[PolygonNetwork(network)]

    @staticmethod
    def _convert_level(level: PolygonFeeLevel) -> GasPriceLevel:
        return GasPriceLevel(
            max_priority_fee_per_gas=level.max_priority_fee,
            max_fee_per_gas=level.max_fee,
        )

    def _convert_response(self, response: dict) -> GasPrice:
        try:
            station_response = PolygonGasStationResponse.model_validate(response)
        except ValidationError as e:
            raise self.handle_exception(e, response=response)

        return GasPrice(
            last_block=station_response.block_number,
            low=self._convert_level(station_response.safe_low),
            average=self._convert_level(station_response.standard),
            high=self._convert_level(station_response.fast),
            asap=derive_asap_level(
                station_response.estimated_base_fee,
                station_response.fast.max_priority_fee,
            ),
        )
