# domain/entities/rider.py
from dataclasses import dataclass, field

from ride_share.domain.entities.ride import Ride
from ride_share.io.report import BANNER, RULE, money


@dataclass
class Rider:
    id: str
    name: str
    rides: list[Ride] = field(default_factory=list)  # append-only history

    def request_ride(self, ride: Ride) -> Ride:
        self.rides.append(ride)
        return ride

    def view_rides(self) -> list[str]:
        lines = [BANNER, f"Rider History for: {self.name}", f"Total Rides: {len(self.rides)}", RULE]
        lines += [f"  - Ride ID: {r.get_id()}, Fare: {money(r.get_fare())}" for r in self.rides]
        lines.append(BANNER)
        return lines
