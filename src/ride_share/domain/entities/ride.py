# domain/entities/ride.py
from dataclasses import dataclass, field
from enum import Enum

from ride_share.app.protocols import PricingPolicy
from ride_share.io.report import money, number


class RideKind(str, Enum):
    STANDARD = "standard"
    PREMIUM = "premium"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class FareNotComputedError(RuntimeError):
    """Raised when a fare is read before ``calculate_fare`` has run."""

    def __init__(self, ride_id: str):
        super().__init__(f"fare for ride {ride_id!r} has not been computed")
        self.ride_id = ride_id


@dataclass(eq=False)
class Ride:
    """
    A single trip. Identity, locations, distance and kind are fixed at construction;
    ``fare`` stays None until ``calculate_fare`` prices the ride with its policy.
    """

    ride_id: str
    pickup: str
    dropoff: str
    distance: float  # miles
    kind: RideKind
    pricing: PricingPolicy = field(repr=False)
    fare: float | None = field(default=None, init=False)

    @property
    def is_priced(self) -> bool:
        return self.fare is not None

    def calculate_fare(self) -> float:
        self.fare = self.pricing.fare(self.distance)
        return self.fare

    def get_fare(self) -> float:
        if self.fare is None:
            raise FareNotComputedError(self.ride_id)
        return self.fare

    def get_id(self) -> str:
        return self.ride_id

    def details(self) -> list[str]:
        lines = [
            f"--- {self.kind.label} Ride ---",
            f"  Ride ID: {self.ride_id}",
            f"  From: {self.pickup}",
            f"  To: {self.dropoff}",
            f"  Distance: {number(self.distance)} miles",
            f"  Fare: {money(self.get_fare())}",
        ]
        if self.kind is RideKind.PREMIUM:
            lines.append("  (Includes premium service)")
        return lines
