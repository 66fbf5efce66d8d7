from enum import Enum
from typing import Union


class EthereumNetwork(str, Enum):
    ETHEREUM = 'ethereum'
    GOERLI = 'goerli'
    SEPOLIA = 'sepolia'
    RINKEBY = 'rinkeby'


class PolygonNetwork(str, Enum):
    POLYGON = 'polygon'
    MUMBAI = 'mumbai'


Network = Union[EthereumNetwork, PolygonNetwork]
