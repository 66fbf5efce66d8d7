from .etherscan_provider import EtherscanProviderV1
