import itertools

import pytest

from linesim.api.schemas import parse_config
from linesim.models.resource_state import ResourceState
from linesim.simulation.random_source import RandomSource, RandomStreams
from linesim.simulation.timing import StageTimingTable


class ScriptedSource(RandomSource):
    """RandomSource that replays fixed samples, cycling when the script runs out."""

    def __init__(self, *values):
        super().__init__(seed=0)
        self.values = list(values)
        self._script = itertools.cycle(self.values)
        self.calls = 0
        self.seen = []

    def sample(self, distribution):
        self.calls += 1
        self.seen.append(distribution)
        return next(self._script)


def scripted_streams(arrival=(3.0,), stage=(2.0,), failure=(20.0,), repair=(30,)):
    return RandomStreams(
        seed=0,
        arrival=ScriptedSource(*arrival),
        stage=ScriptedSource(*stage),
        failure=ScriptedSource(*failure),
        repair=ScriptedSource(*repair),
    )


def make_config(**overrides):
    values = {
        "machine_counts": {
            "raw_material": 1,
            "machining": 1,
            "assembly": 1,
            "quality_control": 1,
            "packaging": 1,
        },
        "setup_time": 5,
        "maintenance_interval": 50,
        "shift_length": 40,
    }
    values.update(overrides)
    return parse_config(values)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def timing(config):
    return StageTimingTable(config.machine_counts)


@pytest.fixture
def state():
    return ResourceState()
