from .aiohttp_session import *  # noqa: F401, F403
from .gas_stations import *  # noqa: F401, F403
