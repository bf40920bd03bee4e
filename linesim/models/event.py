# linesim/models/event.py

from enum import Enum
from pydantic import BaseModel, ConfigDict, conint
from typing import Optional

# product_type carried by machine-wide events
NO_PRODUCT = -1


class EventType(str, Enum):
    ARRIVAL = "ARRIVAL"
    END_RAW_MATERIAL = "END_RAW_MATERIAL"
    END_MACHINING = "END_MACHINING"
    END_ASSEMBLY = "END_ASSEMBLY"
    END_QUALITY_CONTROL = "END_QUALITY_CONTROL"
    END_PACKAGING = "END_PACKAGING"
    SETUP_CHANGE = "SETUP_CHANGE"
    MACHINE_FAILURE = "MACHINE_FAILURE"
    MAINTENANCE = "MAINTENANCE"

    @property
    def is_machine_wide(self) -> bool:
        return self in (EventType.MACHINE_FAILURE, EventType.MAINTENANCE)


class MaintenanceOrigin(str, Enum):
    INTERVAL = "interval"  # first maintenance, placed at the configured interval
    REPAIR = "repair"  # machine back online after a failure
    CYCLE = "cycle"  # recurring fixed-length cycle
    SHIFT = "shift"  # triggered by the shift-end rule


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    time: conint(ge=0)
    type: EventType
    product_type: int = NO_PRODUCT
    origin: Optional[MaintenanceOrigin] = None  # MAINTENANCE only

    @property
    def is_shift_maintenance(self) -> bool:
        return self.type == EventType.MAINTENANCE and self.origin == MaintenanceOrigin.SHIFT


def make_event(time: int, type: EventType, product_type: int = NO_PRODUCT,
               origin: Optional[MaintenanceOrigin] = None) -> Event:
    if type.is_machine_wide:
        product_type = NO_PRODUCT
    if type != EventType.MAINTENANCE:
        origin = None
    elif origin is None:
        origin = MaintenanceOrigin.CYCLE
    return Event(time=time, type=type, product_type=product_type, origin=origin)


class EventRecord(BaseModel):
    """What the processor reports about one handled event."""

    model_config = ConfigDict(frozen=True)

    time: int
    type: EventType
    product_type: Optional[int] = None  # None for machine-wide events
    note: Optional[str] = None

    @classmethod
    def for_event(cls, event: Event, note: Optional[str] = None) -> "EventRecord":
        product_type = None if event.type.is_machine_wide else event.product_type
        return cls(time=event.time, type=event.type, product_type=product_type, note=note)
