# linesim/models/summary.py

from pydantic import BaseModel, Field
from typing import Dict, List

from .event import EventRecord, EventType


class RunSummary(BaseModel):
    events_processed: int = 0
    final_time: int = 0
    event_counts: Dict[EventType, int] = Field(default_factory=dict)
    units_completed: Dict[int, int] = Field(default_factory=dict)  # product type -> packaged units
    records: List[EventRecord] = Field(default_factory=list)

    def add(self, record: EventRecord):
        self.events_processed += 1
        self.final_time = record.time
        self.event_counts[record.type] = self.event_counts.get(record.type, 0) + 1
        if record.type == EventType.END_PACKAGING:
            self.units_completed[record.product_type] = self.units_completed.get(record.product_type, 0) + 1
        self.records.append(record)

    def count(self, event_type: EventType) -> int:
        return self.event_counts.get(event_type, 0)

    def throughput(self) -> int:
        return sum(self.units_completed.values())
