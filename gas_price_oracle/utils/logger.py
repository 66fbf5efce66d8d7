from contextvars import ContextVar
from logging import LoggerAdapter, getLogger
from logging.config import dictConfig
from typing import Optional
from uuid import uuid4

from gas_price_oracle.config import Config, config as default_config

CORRELATION_ID = "cid"

# This field is keyword argument from <https://github.com/python/cpython/blob/3.10/Lib/logging/__init__.py#L1600>
#   and never changed.
EXTRA = "extra"

correlation_id = ContextVar(CORRELATION_ID, default=uuid4().hex)


def get_logging_config(config: Config) -> dict:
    handlers = {
        'console': {
            'class': 'logging.StreamHandler',
            'level': config.LOGGING_LEVEL,
            'formatter': 'simple',
            'stream': 'ext://sys.stdout'
        },
        'logstash': {
            'level': config.LOGSTASH_LOGGING_LEVEL,
            'class': 'logstash_async.handler.AsynchronousLogstashHandler',
            'transport': 'logstash_async.transport.TcpTransport',
            'formatter': 'logstash',
            'host': config.LOGSTASH,
            'port': config.PORT,
            'database_path': None,
            'event_ttl': 30  # sec
        }
    }
    # dictConfig instantiates every declared handler, so only declare the enabled ones.
    enabled = {name: handler for name, handler in handlers.items() if name in config.LOG_HANDLERS}
    return dict(
        # See: <https://docs.python.org/3/library/logging.config.html#logging.config.fileConfig>
        # and find `disable_existing_loggers`, it's same configuration parameter as for dictConfig function.
        disable_existing_loggers=False,
        version=1,
        formatters={
            'simple': {
                'format': '%(asctime)s - %(filename)s:%(lineno)s:%(funcName)s - %(levelname)s - %(message)s'
            },
            'logstash': {
                '()': 'logstash_formatter.LogstashFormatterV1'
            }
        },
        handlers=enabled,
        root={
            'handlers': list(enabled),
            'level': config.LOGGING_LEVEL,
        },
    )


class CustomContextLogger(LoggerAdapter):

    def process(self, msg, kwargs):
        if EXTRA not in kwargs:
            kwargs[EXTRA] = dict(self.extra)
        else:
            kwargs[EXTRA].update(self.extra)

        # assigning a correlation key to all log messages
        kwargs[EXTRA][CORRELATION_ID] = self.get_correlation_id()

        return msg, kwargs

    @staticmethod
    def get_correlation_id():
        return correlation_id.get()


class LogArgs:
    network = "network"  # network name, e.g. ethereum or polygon
    gas_station = "gas_station"  # upstream gas station name
    url = "url"  # gas station request url
    status = "status"  # upstream HTTP status
    fallback_gas_price = "fallback_gas_price"
    ex = "ex"  # human readable exception description


def setup_logging(config: Config = default_config) -> None:
    """
    Configures the root logger with the console and logstash handlers from config.
    Applications opt in by calling it, the library itself never touches the root logger.
    """
    dictConfig(get_logging_config(config))


def get_logger(
    name: str,
    extra: Optional[dict] = None,
    corr_id: Optional[str] = None,
) -> "CustomContextLogger":
    extra = extra or {}

    if corr_id:
        correlation_id.set(corr_id)

    logger = CustomContextLogger(getLogger(name), extra)
    return logger


def set_correlation_id(corr_id: str):
    correlation_id.set(corr_id)


def set_new_correlation_id():
    set_correlation_id(uuid4().hex)
