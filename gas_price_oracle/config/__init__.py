from pydantic_settings import BaseSettings, SettingsConfigDict

from gas_price_oracle.config.gas_stations import GasStationConfig
from gas_price_oracle.config.logger import LoggerConfig


class Config(LoggerConfig, GasStationConfig, BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')


config = Config()
