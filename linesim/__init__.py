# linesim/__init__.py
from .api import MachineCounts, SimulationConfig, parse_config
from .errors import EmptyQueue, InvalidConfiguration, InvalidProductType, SimulationError
from .models import Event, EventRecord, EventType, ResourceState, RunSummary
from .simulation import EventProcessor, EventQueue, RandomSource, RandomStreams, SimulationEngine, StageTimingTable
