# ride_share/domain/state.py
from dataclasses import dataclass, field

from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import Ride
from ride_share.domain.entities.rider import Rider


@dataclass
class WorldState:
    drivers: dict[str, Driver] = field(default_factory=dict)
    riders: dict[str, Rider] = field(default_factory=dict)
    rides: dict[str, Ride] = field(default_factory=dict)  # owns every Ride record

    # processing order: ride_id -> (driver_id, rider_id)
    routes: dict[str, tuple[str, str]] = field(default_factory=dict)

    def add_driver(self, d: Driver) -> None:
        self.drivers[d.id] = d

    def add_rider(self, r: Rider) -> None:
        self.riders[r.id] = r

    def add_ride(self, ride: Ride, *, driver_id: str, rider_id: str) -> None:
        if ride.ride_id in self.rides:
            raise ValueError(f"duplicate ride id {ride.ride_id!r}")
        if driver_id not in self.drivers:
            raise KeyError(f"unknown driver {driver_id!r}")
        if rider_id not in self.riders:
            raise KeyError(f"unknown rider {rider_id!r}")
        self.rides[ride.ride_id] = ride
        self.routes[ride.ride_id] = (driver_id, rider_id)

    def route(self, ride_id: str) -> tuple[Ride, Driver, Rider]:
        driver_id, rider_id = self.routes[ride_id]
        return self.rides[ride_id], self.drivers[driver_id], self.riders[rider_id]
