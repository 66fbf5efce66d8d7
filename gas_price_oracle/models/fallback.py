from typing import Awaitable, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict


class FixedFallback(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal['fixed'] = 'fixed'
    value: float

    async def resolve(self) -> float:
        return self.value


class DeferredFallback(BaseModel):
    """
    Fallback computed only when it is needed, e.g. by reading the gas price
    from a node. `producer` is a coroutine function without arguments,
    awaited once per failed gas station request.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal['deferred'] = 'deferred'
    producer: Callable[[], Awaitable[float]]

    async def resolve(self) -> float:
        return await self.producer()


FallbackGasPrice = Union[FixedFallback, DeferredFallback]


def as_fallback(value: Union[FallbackGasPrice, float]) -> FallbackGasPrice:
    if isinstance(value, (FixedFallback, DeferredFallback)):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return FixedFallback(value=value)
    raise TypeError(
        f'Fallback gas price must be a number, FixedFallback or DeferredFallback, got {type(value).__name__}'
    )
