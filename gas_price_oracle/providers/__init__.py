from gas_price_oracle.providers.base_provider import BaseGasStationProvider
from gas_price_oracle.providers.etherscan_v1 import EtherscanProviderV1
from gas_price_oracle.providers.polygon_gas_station_v2 import PolygonGasStationProviderV2
