# domain/entities/driver.py
from dataclasses import dataclass, field

from ride_share.domain.entities.ride import Ride
from ride_share.io.report import BANNER, money, number


@dataclass
class Driver:
    id: str
    name: str
    rating: float  # 0.0 - 5.0
    rides: list[Ride] = field(default_factory=list)  # shared with riders, not owned

    @property
    def completed_rides(self) -> int:
        return len(self.rides)

    def add_ride(self, ride: Ride) -> None:
        # no duplicate check: a ride added twice is earned twice
        self.rides.append(ride)

    def total_earnings(self) -> float:
        return sum(r.get_fare() for r in self.rides)

    def get_driver_info(self) -> list[str]:
        return [
            BANNER,
            "Driver Info:",
            f"Name: {self.name} (ID: {self.id})",
            f"Rating: {number(self.rating)} / 5.0",
            f"Completed Rides: {self.completed_rides}",
            f"Total Earnings: {money(self.total_earnings())}",
            BANNER,
        ]
