import subprocess
import sys
import textwrap
from pathlib import Path
from unittest.mock import MagicMock

from gas_price_oracle.config import Config
from gas_price_oracle.utils.errors import GasStationStatusError
from gas_price_oracle.utils.logger import (
    LogArgs,
    get_logger,
    get_logging_config,
    setup_logging,
)


def test_logging_config_console_only():
    logging_config = get_logging_config(Config(LOG_HANDLERS=['console'], LOGGING_LEVEL='DEBUG'))

    assert list(logging_config['handlers']) == ['console']
    assert logging_config['root'] == {'handlers': ['console'], 'level': 'DEBUG'}


def test_logging_config_with_logstash():
    logging_config = get_logging_config(Config(LOG_HANDLERS=['console', 'logstash'], LOGSTASH='localhost'))

    assert logging_config['handlers']['logstash']['host'] == 'localhost'
    assert logging_config['root']['handlers'] == ['console', 'logstash']


def test_error_log_args():
    error = GasStationStatusError('etherscan', 'Bad Gateway', **{LogArgs.status: 502})

    msg, args = error.to_log_args()

    assert msg % args == 'gas station responded with an error status. Source: etherscan, reason: Bad Gateway'
    assert error.status == 502
    assert error.to_dict() == {'provider': 'etherscan', 'reason': 'Bad Gateway', 'status': 502}
    assert str(error) == 'Gas station responded with an error status. Source: etherscan'


def test_import_keeps_host_logging():
    # Runs in a fresh interpreter, the test session has already imported the package.
    code = textwrap.dedent(
        '''
        import io
        import logging

        host_handler = logging.StreamHandler(io.StringIO())
        root = logging.getLogger()
        root.addHandler(host_handler)
        root.setLevel(logging.DEBUG)

        import gas_price_oracle  # noqa: F401

        assert host_handler in root.handlers, root.handlers
        assert root.level == logging.DEBUG, root.level
        '''
    )

    result = subprocess.run(
        [sys.executable, '-c', code], capture_output=True, text=True, cwd=Path(__file__).parents[3]
    )

    assert result.returncode == 0, result.stderr


def test_setup_logging(monkeypatch):
    dict_config_mock = MagicMock()
    monkeypatch.setattr('gas_price_oracle.utils.logger.dictConfig', dict_config_mock)
    config = Config(LOG_HANDLERS=['console'], LOGGING_LEVEL='WARNING')

    setup_logging(config)

    dict_config_mock.assert_called_once_with(get_logging_config(config))


def test_get_logger_does_not_configure_root(monkeypatch):
    dict_config_mock = MagicMock()
    monkeypatch.setattr('gas_price_oracle.utils.logger.dictConfig', dict_config_mock)

    logger = get_logger('gas_price_oracle.tests', corr_id='abc')

    dict_config_mock.assert_not_called()
    assert logger.get_correlation_id() == 'abc'
