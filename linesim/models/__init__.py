# linesim/models/__init__.py
from .event import NO_PRODUCT, Event, EventRecord, EventType, MaintenanceOrigin, make_event
from .resource_state import ResourceState
from .summary import RunSummary
