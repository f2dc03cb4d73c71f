# ride_share/policy/pricing.py
from ride_share.app.protocols import PricingPolicy


class PerMilePricingPolicy(PricingPolicy):
    """distance * rate_per_mile, raised to minimum_fare when one is set."""

    def __init__(self, rate_per_mile: float, minimum_fare: float | None = None):
        self.rate_per_mile = rate_per_mile
        self.minimum_fare = minimum_fare

    def fare(self, distance_mi: float) -> float:
        fare = distance_mi * self.rate_per_mile
        if self.minimum_fare is None:
            return fare
        return max(fare, self.minimum_fare)

    def __repr__(self) -> str:
        return f"PerMilePricingPolicy({self.rate_per_mile!r}, minimum_fare={self.minimum_fare!r})"
