from typing import Optional

from pydantic_settings import BaseSettings


class GasStationConfig(BaseSettings):
    REQUEST_TIMEOUT: float = 7
    PROXY_URL: Optional[str] = None
