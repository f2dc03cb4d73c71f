# tests/app/test_demand.py
import numpy as np

from ride_share.app.controllers.demand import DemandGenerator
from ride_share.config.models import DemandModel, PricingModel
from ride_share.domain.entities.ride import RideKind
from ride_share.runtime.policy_factory import make_pricing_policies
from ride_share.sim.rng import RNGRegistry


def _gen(cfg: DemandModel, seed=3):
    pricing = make_pricing_policies(PricingModel())
    return DemandGenerator(cfg, pricing, rng=RNGRegistry(seed, scenario="t").stream("demand"))


def test_generation_is_deterministic():
    cfg = DemandModel(count=10, seed=3)
    a = [(r.ride_id, r.pickup, r.dropoff, r.distance) for r in _gen(cfg).generate()]
    b = [(r.ride_id, r.pickup, r.dropoff, r.distance) for r in _gen(cfg).generate()]
    assert a == b
    assert len(a) == 10


def test_generated_rides_respect_bounds():
    cfg = DemandModel(count=50, min_distance=2.0, max_distance=4.0)
    for r in _gen(cfg).generate():
        assert 2.0 <= r.distance <= 4.0
        assert r.pickup != r.dropoff
        assert not r.is_priced
        prefix = "P" if r.kind is RideKind.PREMIUM else "S"
        assert r.ride_id.startswith(prefix + "G")


def test_premium_share_extremes():
    all_premium = _gen(DemandModel(count=20, premium_share=1.0)).generate()
    assert all(r.kind is RideKind.PREMIUM for r in all_premium)
    none_premium = _gen(DemandModel(count=20, premium_share=0.0)).generate()
    assert all(r.kind is RideKind.STANDARD for r in none_premium)


def test_generated_rides_price_with_their_kind():
    for r in _gen(DemandModel(count=20)).generate():
        fare = r.calculate_fare()
        if r.kind is RideKind.PREMIUM:
            assert fare == max(r.distance * 3.0, 10.0)
        else:
            assert fare == r.distance * 1.5


def test_zero_count_generates_nothing():
    assert _gen(DemandModel()).generate() == []


def test_uses_given_generator():
    cfg = DemandModel(count=1)
    pricing = make_pricing_policies(PricingModel())
    g = np.random.default_rng(0)
    ride = DemandGenerator(cfg, pricing, rng=g).sample_ride(7)
    assert ride.ride_id.endswith("G0007")


def test_distances_stay_in_range_after_rounding():
    cfg = DemandModel(count=200, min_distance=2.04, max_distance=2.06)
    for r in _gen(cfg).generate():
        assert 2.04 <= r.distance <= 2.06
