from .polygon_gas_station_provider import PolygonGasStationProviderV2
