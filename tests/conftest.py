import random

import pytest

from swipe_times.services.card_machine import CardStateMachine
from swipe_times.services.drill_service import DrillSession
from swipe_times.services.fact_pool import FactPool
from swipe_times.services.metrics import MetricsAccumulator


class FakeClock:
    """Monotonic clock stand-in that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def advance(self, seconds: float):
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def pool(rng):
    fact_pool = FactPool(rng)
    fact_pool.initialize()
    return fact_pool


@pytest.fixture
def metrics(clock):
    accumulator = MetricsAccumulator(clock)
    accumulator.reset()
    return accumulator


@pytest.fixture
def machine(pool, metrics):
    return CardStateMachine(pool, metrics)


@pytest.fixture
def session(rng, clock):
    return DrillSession(rng=rng, clock=clock)
