# ride_share/app/build.py
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO

from ride_share.app.controllers.demand import DemandGenerator
from ride_share.app.controllers.dispatch import RideProcessor
from ride_share.config.models import ScenarioModel, default_scenario
from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import Ride, RideKind
from ride_share.domain.entities.rider import Rider
from ride_share.domain.state import WorldState
from ride_share.io.recorder import JsonlSink, MemorySink, Recorder
from ride_share.io.run_logging import RunLogging  # JSON logs
from ride_share.runtime.policy_factory import make_pricing_policies
from ride_share.sim.hooks import NoopHooks
from ride_share.sim.rng import RNGRegistry


@dataclass
class App:
    model: ScenarioModel
    world: WorldState
    rng: RNGRegistry
    processor: RideProcessor
    events: MemorySink

    def run(self) -> int:
        processed = self.processor.process_all()
        self.processor.report()
        return processed


def build(
    cfg: ScenarioModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    out: TextIO | None = None,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = default_scenario()
    else:
        model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) RNG & policies
    rng_registry = RNGRegistry(model.demand.seed, scenario=model.name)
    pricing = make_pricing_policies(model.pricing)

    # 2) Recorder & hooks
    events = MemorySink()
    sinks = [events]
    if model.log.record_events:
        sinks.append(JsonlSink(sys.stderr))
    recorder = Recorder(*sinks)

    hooks = (
        RunLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) World: participants, scripted rides, then synthetic demand
    world = WorldState()
    for d in model.drivers:
        world.add_driver(Driver(id=d.id, name=d.name, rating=d.rating))
    for r in model.riders:
        world.add_rider(Rider(id=r.id, name=r.name))

    first_driver, first_rider = model.drivers[0].id, model.riders[0].id
    for rm in model.rides:
        kind = RideKind(rm.kind)
        ride = Ride(
            ride_id=rm.id,
            pickup=rm.pickup,
            dropoff=rm.dropoff,
            distance=rm.distance,
            kind=kind,
            pricing=pricing[kind],
        )
        world.add_ride(
            ride, driver_id=rm.driver_id or first_driver, rider_id=rm.rider_id or first_rider
        )

    demand = DemandGenerator(model.demand, pricing, rng=rng_registry.stream("demand"))
    for ride in demand.generate():
        world.add_ride(ride, driver_id=first_driver, rider_id=first_rider)

    # 4) Handlers
    processor = RideProcessor(world, hooks=hooks, out=out, scenario=model.name)

    return App(model, world, rng_registry, processor, events)
