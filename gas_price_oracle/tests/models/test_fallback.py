from unittest.mock import AsyncMock

import pytest

from gas_price_oracle.models.fallback import DeferredFallback, FixedFallback, as_fallback
from gas_price_oracle.models.gas_models import GasPrice


@pytest.mark.asyncio
async def test_fixed_fallback_resolve():
    assert await FixedFallback(value=42).resolve() == 42


@pytest.mark.asyncio
async def test_deferred_fallback_resolve():
    producer = AsyncMock(return_value=33.3)
    fallback = DeferredFallback(producer=producer)
    producer.assert_not_awaited()
    assert await fallback.resolve() == 33.3
    producer.assert_awaited_once()


def test_as_fallback():
    assert as_fallback(80) == FixedFallback(value=80)
    deferred = DeferredFallback(producer=AsyncMock(return_value=1))
    assert as_fallback(deferred) is deferred


@pytest.mark.parametrize('value', ['80', True, None, lambda: 80])
def test_as_fallback_wrong_type(value):
    with pytest.raises(TypeError):
        as_fallback(value)


def test_gas_price_from_fallback():
    gas_price = GasPrice.from_fallback(80)
    assert gas_price.last_block is None
    for level in (gas_price.low, gas_price.average, gas_price.high, gas_price.asap):
        assert level.max_priority_fee_per_gas == 80
        assert level.max_fee_per_gas == 80


def test_gas_price_dump_by_alias():
    assert GasPrice.from_fallback(50).model_dump(by_alias=True) == {
        'LastBlock': None,
        'low': {'maxPriorityFeePerGas': 50, 'maxFeePerGas': 50},
        'average': {'maxPriorityFeePerGas': 50, 'maxFeePerGas': 50},
        'high': {'maxPriorityFeePerGas': 50, 'maxFeePerGas': 50},
        'asap': {'maxPriorityFeePerGas': 50, 'maxFeePerGas': 50},
    }
