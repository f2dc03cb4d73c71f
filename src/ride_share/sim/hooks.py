# sim/hooks.py
from typing import Protocol


class RunHooks(Protocol):
    def run_start(self, *, scenario: str, rides: int): ...
    def run_end(self, *, processed: int, wall_ms: float): ...
    def ride_priced(self, ride, *, seq: int): ...
    def ride_assigned(self, ride, driver, *, seq: int): ...
    def ride_requested(self, ride, rider, *, seq: int): ...
    def error(self, ride, *, exc: BaseException, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def ride_priced(self, *_, **__):
        pass

    def ride_assigned(self, *_, **__):
        pass

    def ride_requested(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
