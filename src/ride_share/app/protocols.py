from typing import Protocol, runtime_checkable


@runtime_checkable
class PricingPolicy(Protocol):
    """Fare for a trip of ``distance_mi`` miles. Must be deterministic."""

    def fare(self, distance_mi: float) -> float: ...


@runtime_checkable
class Sink(Protocol):
    def write(self, ev) -> None: ...
