# ride_share/io/business_events.py

from dataclasses import dataclass


# Base type for analytics events
@dataclass
class BizEvent:
    run_id: str
    seq: int  # processing sequence (for total ordering)
    name: str  # stable event name


@dataclass
class RidePricedBiz(BizEvent):
    ride_id: str
    kind: str
    distance: float
    fare: float


@dataclass
class RideAssignedBiz(BizEvent):
    ride_id: str
    driver_id: str
    completed_rides: int


@dataclass
class RideRequestedBiz(BizEvent):
    ride_id: str
    rider_id: str
    total_rides: int
