from gas_price_oracle.models.fallback import DeferredFallback, FixedFallback
from gas_price_oracle.models.gas_models import GasPrice, GasPriceLevel
from gas_price_oracle.models.network import EthereumNetwork, PolygonNetwork
from gas_price_oracle.services.fee_levels import ASAP_PERCENTAGE, derive_asap_level
from gas_price_oracle.services.gas_service import (
    get_ethereum_gas_price,
    get_gas_price,
    get_polygon_gas_price,
)
