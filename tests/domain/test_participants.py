# tests/domain/test_participants.py
import pytest

from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import FareNotComputedError, Ride, RideKind
from ride_share.domain.entities.rider import Rider
from ride_share.domain.state import WorldState
from ride_share.policy.pricing import PerMilePricingPolicy

STANDARD = PerMilePricingPolicy(1.50)
PREMIUM = PerMilePricingPolicy(3.00, minimum_fare=10.0)


def _priced(ride_id, kind, distance):
    policy = PREMIUM if kind is RideKind.PREMIUM else STANDARD
    ride = Ride(ride_id, "A", "B", distance, kind, policy)
    ride.calculate_fare()
    return ride


@pytest.fixture
def rides():
    return [
        _priced("S1001", RideKind.STANDARD, 5.0),
        _priced("P1002", RideKind.PREMIUM, 12.0),
        _priced("S1003", RideKind.STANDARD, 3.0),
    ]


def test_driver_total_earnings(rides):
    d = Driver("D101", "James", 4.8)
    for r in rides:
        d.add_ride(r)
    assert d.completed_rides == 3
    assert d.total_earnings() == pytest.approx(48.00)


def test_driver_counts_duplicates(rides):
    d = Driver("D101", "James", 4.8)
    d.add_ride(rides[0])
    d.add_ride(rides[0])
    assert d.completed_rides == 2
    assert d.total_earnings() == pytest.approx(15.00)


def test_driver_earnings_are_recomputed_each_call(rides):
    d = Driver("D101", "James", 4.8)
    d.add_ride(rides[0])
    assert d.total_earnings() == pytest.approx(7.50)
    rides[0].fare = 9.0
    assert d.total_earnings() == pytest.approx(9.0)


def test_driver_with_unpriced_ride_fails_fast():
    d = Driver("D101", "James", 4.8)
    d.add_ride(Ride("S9", "A", "B", 2.0, RideKind.STANDARD, STANDARD))
    with pytest.raises(FareNotComputedError):
        d.total_earnings()


def test_driver_info(rides):
    d = Driver("D101", "James", 4.8)
    for r in rides:
        d.add_ride(r)
    assert d.get_driver_info() == [
        "===========================",
        "Driver Info:",
        "Name: James (ID: D101)",
        "Rating: 4.8 / 5.0",
        "Completed Rides: 3",
        "Total Earnings: $48.00",
        "===========================",
    ]


def test_request_ride_returns_same_reference(rides):
    rider = Rider("R201", "Kate")
    for r in rides:
        assert rider.request_ride(r) is r


def test_rider_history_length_counts_every_request(rides):
    rider = Rider("R201", "Kate")
    rider.request_ride(rides[1])
    rider.request_ride(rides[1])
    rider.request_ride(rides[2])
    assert len(rider.rides) == 3


def test_rider_view_rides(rides):
    rider = Rider("R201", "Kate")
    for r in rides:
        rider.request_ride(r)
    assert rider.view_rides() == [
        "===========================",
        "Rider History for: Kate",
        "Total Rides: 3",
        "---------------------------",
        "  - Ride ID: S1001, Fare: $7.50",
        "  - Ride ID: P1002, Fare: $36.00",
        "  - Ride ID: S1003, Fare: $4.50",
        "===========================",
    ]


def test_driver_and_rider_share_ride_objects(rides):
    d = Driver("D101", "James", 4.8)
    rider = Rider("R201", "Kate")
    for r in rides:
        d.add_ride(rider.request_ride(r))
    assert all(a is b for a, b in zip(d.rides, rider.rides))


def test_world_state_routes_and_rejects_bad_ids(rides):
    w = WorldState()
    w.add_driver(Driver("D101", "James", 4.8))
    w.add_rider(Rider("R201", "Kate"))
    w.add_ride(rides[0], driver_id="D101", rider_id="R201")

    ride, driver, rider = w.route("S1001")
    assert ride is rides[0]
    assert (driver.id, rider.id) == ("D101", "R201")

    with pytest.raises(ValueError):
        w.add_ride(rides[0], driver_id="D101", rider_id="R201")
    with pytest.raises(KeyError):
        w.add_ride(rides[1], driver_id="D999", rider_id="R201")
    with pytest.raises(KeyError):
        w.add_ride(rides[1], driver_id="D101", rider_id="R999")
