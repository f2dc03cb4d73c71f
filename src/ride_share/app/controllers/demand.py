# ride_share/app/controllers/demand.py
import numpy as np

from ride_share.app.protocols import PricingPolicy
from ride_share.config.models import DemandModel, synthetic_ride_id
from ride_share.domain.entities.ride import Ride, RideKind


class DemandGenerator:
    """Samples synthetic rides from a seeded numpy stream."""

    def __init__(
        self, cfg: DemandModel, pricing: dict[RideKind, PricingPolicy], rng: np.random.Generator
    ):
        self.cfg = cfg
        self.pricing = pricing
        self.rng = rng

    def sample_ride(self, n: int) -> Ride:
        cfg = self.cfg
        kind = RideKind.PREMIUM if self.rng.random() < cfg.premium_share else RideKind.STANDARD
        distance = round(float(self.rng.uniform(cfg.min_distance, cfg.max_distance)), 1)
        # rounding must not leave the configured range
        distance = min(max(distance, cfg.min_distance), cfg.max_distance)
        # pickup != dropoff
        i, j = self.rng.choice(len(cfg.locations), size=2, replace=False)
        prefix = "P" if kind is RideKind.PREMIUM else "S"
        return Ride(
            ride_id=synthetic_ride_id(prefix, n),
            pickup=cfg.locations[int(i)],
            dropoff=cfg.locations[int(j)],
            distance=distance,
            kind=kind,
            pricing=self.pricing[kind],
        )

    def generate(self) -> list[Ride]:
        return [self.sample_ride(n) for n in range(1, self.cfg.count + 1)]
