import re
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    record_events: bool = False  # also write business events as JSON lines to stderr


# ----------------- PRICING ---------------------


class PricingPolicyPerMileModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["per_mile"] = "per_mile"
    rate_per_mile: float = 1.50
    minimum_fare: float | None = None

    @field_validator("rate_per_mile", "minimum_fare")
    def _nonneg(cls, v: float | None, info: ValidationInfo) -> float | None:
        if v is not None and v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


class PremiumPricingPolicyPerMileModel(PricingPolicyPerMileModel):
    # premium fields left out of a scenario keep the premium defaults
    rate_per_mile: float = 3.00
    minimum_fare: float | None = 10.0


PricingPolicyUnion = Annotated[PricingPolicyPerMileModel, Field(discriminator="kind")]
PremiumPricingPolicyUnion = Annotated[
    PremiumPricingPolicyPerMileModel, Field(discriminator="kind")
]


class PricingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    standard: PricingPolicyUnion = Field(default_factory=PricingPolicyPerMileModel)
    premium: PremiumPricingPolicyUnion = Field(default_factory=PremiumPricingPolicyPerMileModel)


# ----------------- PARTICIPANTS & RIDES ---------------------


class DriverModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str
    name: str
    rating: float = Field(default=5.0, ge=0.0, le=5.0)


class RiderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str
    name: str


class RideModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str
    kind: Literal["standard", "premium"] = "standard"
    pickup: str
    dropoff: str
    distance: float = Field(ge=0.0)  # miles
    driver_id: str | None = None  # None -> first driver
    rider_id: str | None = None  # None -> first rider


def synthetic_ride_id(prefix: str, n: int) -> str:
    """Id of the n-th generated ride (1-based); prefix is "S" or "P"."""
    return f"{prefix}G{n:04d}"


class DemandModel(BaseModel):
    """Seeded synthetic rides appended after the scripted ones."""

    model_config = ConfigDict(extra="forbid")
    count: int = Field(default=0, ge=0)
    seed: int = 0
    min_distance: float = Field(default=0.5, ge=0.0)
    max_distance: float = 20.0
    premium_share: float = Field(default=0.25, ge=0.0, le=1.0)
    locations: list[str] = Field(
        default_factory=lambda: ["123 Main St", "456 Oak Ave", "789 Pine Ln", "321 Maple Dr"]
    )

    @model_validator(mode="after")
    def _check_ranges(self):
        if self.max_distance < self.min_distance:
            raise ValueError("max_distance must be >= min_distance")
        if self.count and len(self.locations) < 2:
            raise ValueError("locations needs at least two entries to generate rides")
        return self


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "demo"
    run_id: str = "local"
    log: LogModel = LogModel()
    pricing: PricingModel = Field(default_factory=PricingModel)
    drivers: list[DriverModel] = Field(min_length=1)
    riders: list[RiderModel] = Field(min_length=1)
    rides: list[RideModel] = Field(default_factory=list)
    demand: DemandModel = Field(default_factory=DemandModel)

    @model_validator(mode="after")
    def _check_ids(self):
        groups = (("driver", self.drivers), ("rider", self.riders), ("ride", self.rides))
        for label, items in groups:
            ids = [x.id for x in items]
            dupes = sorted({i for i in ids if ids.count(i) > 1})
            if dupes:
                raise ValueError(f"duplicate {label} ids: {dupes}")
        driver_ids = {d.id for d in self.drivers}
        rider_ids = {r.id for r in self.riders}
        for ride in self.rides:
            if ride.driver_id is not None and ride.driver_id not in driver_ids:
                raise ValueError(f"ride {ride.id!r} names unknown driver {ride.driver_id!r}")
            if ride.rider_id is not None and ride.rider_id not in rider_ids:
                raise ValueError(f"ride {ride.id!r} names unknown rider {ride.rider_id!r}")
            m = re.fullmatch(r"([SP])G(\d+)", ride.id)
            if m and 1 <= int(m[2]) <= self.demand.count:
                if synthetic_ride_id(m[1], int(m[2])) == ride.id:
                    raise ValueError(f"ride id {ride.id!r} clashes with generated demand ids")
        return self


def default_scenario() -> ScenarioModel:
    return ScenarioModel.model_validate(
        {
            "name": "demo",
            "run_id": "local",
            "drivers": [{"id": "D101", "name": "James", "rating": 4.8}],
            "riders": [{"id": "R201", "name": "Kate"}],
            "rides": [
                {
                    "id": "S1001",
                    "kind": "standard",
                    "pickup": "123 Main St",
                    "dropoff": "456 Oak Ave",
                    "distance": 5.0,
                },
                {
                    "id": "P1002",
                    "kind": "premium",
                    "pickup": "789 Pine Ln",
                    "dropoff": "321 Maple Dr",
                    "distance": 12.0,
                },
                {
                    "id": "S1003",
                    "kind": "standard",
                    "pickup": "321 Maple Dr",
                    "dropoff": "123 Main St",
                    "distance": 3.0,
                },
            ],
        }
    )
