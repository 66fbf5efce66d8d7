from abc import abstractmethod
from typing import Optional

from gas_price_oracle.utils.logger import LogArgs


class BaseGasStationError(Exception):
    """common error for gas stations"""

    @property
    @abstractmethod
    def msg_to_log(self):
        ...

    def __init__(self, provider: str, message: Optional[str] = None, **kwargs):
        super().__init__(provider, message)
        self.provider = provider
        self.message = message
        self.kwargs = kwargs

    def __str__(self):
        return f'{self.msg_to_log}. Source: {self.provider}'

    def __repr__(self):
        return f'{self.__class__.__name__}({self.provider}, {self.message}, {self.kwargs})'

    def to_dict(self):
        return {
            'provider': self.provider,
            'reason': self.message,
            **self.kwargs,
        }

    def to_log_args(self):
        return (
            f'{self.msg_to_log.lower()}. Source: %({LogArgs.gas_station})s, reason: %({LogArgs.ex})s',
            {LogArgs.gas_station: self.provider, LogArgs.ex: self.message},
        )


class GasStationUnavailableError(BaseGasStationError):
    """When gas station cannot be reached or does not respond in time"""
    msg_to_log = 'Gas station is unavailable'


class GasStationStatusError(BaseGasStationError):
    """When gas station responds with a non-success HTTP status"""
    msg_to_log = 'Gas station responded with an error status'

    @property
    def status(self) -> Optional[int]:
        return self.kwargs.get(LogArgs.status)


class ParseResponseError(BaseGasStationError):
    """When gas station returns invalid response, or we parse it wrong"""
    msg_to_log = 'Cannot parse response'


class OracleReportedError(BaseGasStationError):
    """When the request succeeded but the gas oracle reports an error in its body"""
    msg_to_log = 'Gas oracle reported an error'
