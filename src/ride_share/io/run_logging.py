# io/run_logging.py
import json
import logging
import sys

from ride_share.io.business_events import RideAssignedBiz, RidePricedBiz, RideRequestedBiz
from ride_share.io.recorder import Recorder
from ride_share.sim.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _default_json_logger(name="ride_share", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        # stdout carries the ride report
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class RunLogging(NoopHooks):
    """
    Structured JSON logs for a run, plus business events forwarded to the recorder.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def _biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)

    # run lifecycle

    def run_start(self, *, scenario: str, rides: int):
        self._emit("INFO", "run_start", scenario=scenario, rides=rides)

    def run_end(self, *, processed: int, wall_ms: float):
        self._emit("INFO", "run_end", processed=processed, wall_ms=round(wall_ms, 3))

    # per ride

    def ride_priced(self, ride, *, seq: int):
        self._emit("INFO", "RidePriced", ride_id=ride.ride_id, kind=ride.kind.value, fare=ride.fare)
        self._biz(
            RidePricedBiz(
                run_id=self.run_id,
                seq=seq,
                name="RidePriced",
                ride_id=ride.ride_id,
                kind=ride.kind.value,
                distance=ride.distance,
                fare=ride.fare,
            )
        )

    def ride_assigned(self, ride, driver, *, seq: int):
        if self.debug:
            self._emit("DEBUG", "RideAssigned", ride_id=ride.ride_id, driver_id=driver.id)
        self._biz(
            RideAssignedBiz(
                run_id=self.run_id,
                seq=seq,
                name="RideAssigned",
                ride_id=ride.ride_id,
                driver_id=driver.id,
                completed_rides=driver.completed_rides,
            )
        )

    def ride_requested(self, ride, rider, *, seq: int):
        if self.debug:
            self._emit("DEBUG", "RideRequested", ride_id=ride.ride_id, rider_id=rider.id)
        self._biz(
            RideRequestedBiz(
                run_id=self.run_id,
                seq=seq,
                name="RideRequested",
                ride_id=ride.ride_id,
                rider_id=rider.id,
                total_rides=len(rider.rides),
            )
        )

    def error(self, ride, *, exc: BaseException, **extra):
        ride_id = getattr(ride, "ride_id", None)
        self._emit("ERROR", "ride_error", ride_id=ride_id, error=str(exc), **extra)
