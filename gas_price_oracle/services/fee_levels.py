from gas_price_oracle.models.gas_models import GasPriceLevel

# Priority fee of the asap level, in percent of the high level priority fee.
ASAP_PERCENTAGE = 150


def derive_asap_level(base_fee: float, high_priority_fee: float) -> GasPriceLevel:
    max_priority_fee = high_priority_fee * ASAP_PERCENTAGE / 100
    return GasPriceLevel(
        max_priority_fee_per_gas=max_priority_fee,
        max_fee_per_gas=max_priority_fee + base_fee,
    )
