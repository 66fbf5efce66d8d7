import asyncio
from abc import abstractmethod
from typing import Callable, Dict, Optional, Union

import ujson
from aiohttp import (
    ClientError,
    ClientResponse,
    ClientResponseError,
    ClientSession,
    ClientTimeout,
)

from gas_price_oracle.config import Config
from gas_price_oracle.models.fallback import FallbackGasPrice, as_fallback
from gas_price_oracle.models.gas_models import GasPrice
from gas_price_oracle.utils.errors import (
    BaseGasStationError,
    GasStationStatusError,
    GasStationUnavailableError,
    ParseResponseError,
)
from gas_price_oracle.utils.httputils import client_session
from gas_price_oracle.utils.logger import LogArgs, get_logger

logger = get_logger(__name__)

ErrorCallback = Callable[[BaseGasStationError], None]


class BaseGasStationProvider:
    """
    Fetches gas prices from one upstream gas station and converts them to GasPrice.

    Any failure on the way (transport, HTTP status, malformed body, error reported
    by the gas station) ends up in the fallback GasPrice, so `get_gas_price`
    does not raise. Subclasses only describe where to go and how to read the body.
    """

    PROVIDER_NAME = 'base_gas_station'
    GAS_STATION_URL_BY_NETWORK: Dict[str, str] = {}
    DEFAULT_FALLBACK_GAS_PRICE: float = 0

    def __init__(self, *, config: Config, session: Optional[ClientSession] = None):
        self.config = config
        self.session = session

    @abstractmethod
    def _build_url(self, network: str, **params) -> str:
        """Returns the gas station URL for a network of this provider."""

    @abstractmethod
    def _convert_response(self, response: dict) -> GasPrice:
        """
        Converts the decoded body of the gas station to GasPrice.
        Raises BaseGasStationError if the body can't be used.
        """

    async def get_gas_price(
        self,
        network: str,
        fallback_gas_price: Union[FallbackGasPrice, float, None] = None,
        on_error: Optional[ErrorCallback] = None,
        **params,
    ) -> GasPrice:
        """
        Args:
            network: one of GAS_STATION_URL_BY_NETWORK keys
            fallback_gas_price: used for every level when the gas station fails,
                DEFAULT_FALLBACK_GAS_PRICE if not specified
            on_error: called with the error before falling back
            params: extra parameters for the gas station URL

        Returns:
            GasPrice with last_block set on success, or the fallback GasPrice.
        """
        if fallback_gas_price is None:
            fallback_gas_price = self.DEFAULT_FALLBACK_GAS_PRICE
        fallback = as_fallback(fallback_gas_price)
        url = self._build_url(network, **params)

        try:
            response = await self._get_response(url)
            return self._convert_response(response)
        except BaseGasStationError as e:
            error = e

        msg, log_args = error.to_log_args()
        logger.warning(
            msg,
            log_args,
            extra={
                LogArgs.network: getattr(network, 'value', network),
                LogArgs.fallback_gas_price: fallback.kind,
                LogArgs.status: error.kwargs.get(LogArgs.status),
            },
        )
        if on_error:
            on_error(error)
        return GasPrice.from_fallback(await fallback.resolve())

    async def _get_response(self, url: str) -> dict:
        timeout = ClientTimeout(total=self.config.REQUEST_TIMEOUT)
        try:
            async with client_session(self.session) as session:
                async with session.get(url, timeout=timeout, proxy=self.config.PROXY_URL) as response:
                    response: ClientResponse
                    logger.debug(
                        'Request GET %(url)s, status: %(status)s',
                        {LogArgs.url: url, LogArgs.status: response.status},
                        extra={LogArgs.url: url, LogArgs.gas_station: self.PROVIDER_NAME},
                    )
                    response.raise_for_status()
                    return await response.json(content_type=None, loads=ujson.loads)
        except (ClientError, asyncio.TimeoutError, ValueError) as e:
            raise self.handle_exception(e) from e

    def handle_exception(self, exception: Exception, **kwargs) -> BaseGasStationError:
        if isinstance(exception, ClientResponseError):
            return GasStationStatusError(
                self.PROVIDER_NAME,
                exception.message,
                **{LogArgs.status: exception.status},
                **kwargs,
            )
        if isinstance(exception, (ClientError, asyncio.TimeoutError)):
            return GasStationUnavailableError(self.PROVIDER_NAME, str(exception) or repr(exception), **kwargs)
        # ValidationError, KeyError and JSON decoding errors.
        return ParseResponseError(self.PROVIDER_NAME, str(exception), **kwargs)
