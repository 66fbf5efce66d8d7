from typing import Mapping, Optional, Union

from aiohttp import ClientSession

from gas_price_oracle.config import Config, config as default_config
from gas_price_oracle.models.fallback import FallbackGasPrice
from gas_price_oracle.models.gas_models import GasPrice
from gas_price_oracle.models.network import EthereumNetwork, Network, PolygonNetwork
from gas_price_oracle.providers.base_provider import ErrorCallback
from gas_price_oracle.providers.etherscan_v1 import EtherscanProviderV1
from gas_price_oracle.providers.polygon_gas_station_v2 import PolygonGasStationProviderV2
from gas_price_oracle.utils.logger import get_logger

logger = get_logger(__name__)


async def get_ethereum_gas_price(
    network: Union[EthereumNetwork, str],
    api_key: Optional[str] = None,
    fallback_gas_price: Union[FallbackGasPrice, float, None] = None,
    on_error: Optional[ErrorCallback] = None,
    session: Optional[ClientSession] = None,
    config: Config = default_config,
) -> GasPrice:
    """
    Returns the gas prices for an Ethereum network from the Etherscan gas tracker.
    Etherscan rate limits requests without an api key.
    On any failure every level holds the fallback gas price (80 by default) and last_block is None.
    """
    provider = EtherscanProviderV1(config=config, session=session)
    return await provider.get_gas_price(
        EthereumNetwork(network),
        fallback_gas_price=fallback_gas_price,
        on_error=on_error,
        api_key=api_key,
    )


async def get_polygon_gas_price(
    network: Union[PolygonNetwork, str],
    fallback_gas_price: Union[FallbackGasPrice, float, None] = None,
    on_error: Optional[ErrorCallback] = None,
    session: Optional[ClientSession] = None,
    config: Config = default_config,
) -> GasPrice:
    """
    Returns the gas prices for a Polygon network from the Polygon gas station.
    On any failure every level holds the fallback gas price (50 by default) and last_block is None.
    """
    provider = PolygonGasStationProviderV2(config=config, session=session)
    return await provider.get_gas_price(
        PolygonNetwork(network),
        fallback_gas_price=fallback_gas_price,
        on_error=on_error,
    )


def resolve_network(network: Union[Network, str]) -> Network:
    for network_type in (EthereumNetwork, PolygonNetwork):
        try:
            return network_type(network)
        except ValueError:
            continue
    raise ValueError(f'Network {network} is not supported')


async def get_gas_price(
    network: Union[Network, str],
    etherscan_api_key: Optional[str] = None,
    fallback_gas_price: Optional[Mapping[str, Union[FallbackGasPrice, float]]] = None,
    on_error: Optional[ErrorCallback] = None,
    session: Optional[ClientSession] = None,
    config: Config = default_config,
) -> GasPrice:
    """
    Returns the gas prices for any supported network.

    Args:
        network: Ethereum or Polygon network name
        etherscan_api_key: only used for Ethereum networks
        fallback_gas_price: fallback gas price by network name, networks
            missing here use the default fallback of their gas station
        on_error: called with the gas station error before falling back
        session: aiohttp session to reuse, a new one is opened per call if not specified
    """
    network = resolve_network(network)
    fallback_by_network = {
        resolve_network(name): value for name, value in (fallback_gas_price or {}).items()
    }
    fallback = fallback_by_network.get(network)
    logger.debug('Getting gas prices for network %s', network.value)

    if isinstance(network, EthereumNetwork):
        return await get_ethereum_gas_price(
            network,
            api_key=etherscan_api_key,
            fallback_gas_price=fallback,
            on_error=on_error,
            session=session,
            config=config,
        )
    return await get_polygon_gas_price(
        network,
        fallback_gas_price=fallback,
        on_error=on_error,
        session=session,
        config=config,
    )
