# ride_share/app/controllers/dispatch.py
import sys
import time
from typing import TextIO

from ride_share.domain.entities.ride import Ride
from ride_share.domain.state import WorldState
from ride_share.io.report import RULE, write_lines
from ride_share.sim.hooks import NoopHooks, RunHooks


class RideProcessor:
    """
    Walks the world's rides in insertion order: price, print, then hand the same
    Ride reference to its driver and its rider.
    """

    def __init__(
        self,
        world: WorldState,
        hooks: RunHooks | None = None,
        out: TextIO | None = None,
        scenario: str = "",
    ):
        self.world = world
        self.hooks = hooks or NoopHooks()
        self.out = out or sys.stdout
        self.scenario = scenario
        self._seq = 0

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    def process(self, ride_id: str) -> Ride:
        ride, driver, rider = self.world.route(ride_id)
        try:
            ride.calculate_fare()
            write_lines(ride.details(), self.out)
            write_lines([RULE], self.out)

            # both parties hold the ride before any hook can fail
            driver.add_ride(ride)
            rider.request_ride(ride)

            self.hooks.ride_priced(ride, seq=self._next_seq())
            self.hooks.ride_assigned(ride, driver, seq=self._next_seq())
            self.hooks.ride_requested(ride, rider, seq=self._next_seq())
        except Exception as exc:
            self.hooks.error(ride, exc=exc, driver_id=driver.id, rider_id=rider.id)
            raise
        return ride

    def process_all(self) -> int:
        t0 = time.perf_counter()
        self.hooks.run_start(scenario=self.scenario, rides=len(self.world.routes))
        write_lines(["--- Processing All Rides Polymorphically ---", ""], self.out)
        processed = 0
        try:
            for ride_id in list(self.world.routes):
                self.process(ride_id)
                processed += 1
        finally:
            self.hooks.run_end(processed=processed, wall_ms=(time.perf_counter() - t0) * 1000)
        return processed

    def report(self) -> None:
        write_lines(["", "--- Final System State ---", ""], self.out)
        for d in self.world.drivers.values():
            write_lines(d.get_driver_info(), self.out)
        for r in self.world.riders.values():
            write_lines(r.view_rides(), self.out)
