# linesim/simulation/__init__.py
from .engine import SimulationEngine
from .event_queue import EventQueue
from .processor import EventProcessor
from .random_source import (
    ExponentialDistribution,
    NormalDistribution,
    RandomSource,
    RandomStreams,
    UniformIntDistribution,
)
from .timing import DEFAULT_STAGE_TIMES, Stage, StageTimingTable, to_time_units
