# linesim/simulation/engine.py

import logging
from typing import Optional

from linesim.api.schemas import SimulationConfig
from linesim.models.event import Event, EventRecord, EventType, MaintenanceOrigin, make_event
from linesim.models.resource_state import ResourceState
from linesim.models.summary import RunSummary
from linesim.utils.event_log import format_record
from .event_queue import EventQueue
from .processor import EventProcessor
from .random_source import ExponentialDistribution, RandomStreams
from .timing import StageTimingTable, to_time_units


class SimulationEngine:
    def __init__(self, config: SimulationConfig,
                 timing: Optional[StageTimingTable] = None,
                 streams: Optional[RandomStreams] = None):
        self.config = config
        self.timing = timing or StageTimingTable(config.machine_counts)
        self.streams = streams or RandomStreams(config.seed)
        self.processor = EventProcessor(config, self.timing, self.streams)
        self.failure_distribution = ExponentialDistribution(rate=config.failure_rate)
        self.clock = 0
        self.event_queue = EventQueue()
        self.state = ResourceState()
        self.summary = RunSummary()
        self.seeded = False

    # ------------------------------
    # Initial Events
    # ------------------------------
    def seed(self):
        """Queue the first arrival of every product type, the failure and the first maintenance."""
        for product_type in range(self.timing.product_types):
            first_arrival = to_time_units(self.streams.arrival.sample(self.processor.arrival_distribution))
            self.schedule(make_event(first_arrival, EventType.ARRIVAL, product_type))

        failure_time = self.clock + to_time_units(self.streams.failure.sample(self.failure_distribution))
        self.schedule(make_event(failure_time, EventType.MACHINE_FAILURE))

        self.schedule(make_event(
            self.clock + self.config.maintenance_interval, EventType.MAINTENANCE, origin=MaintenanceOrigin.INTERVAL
        ))
        self.seeded = True

    def schedule(self, event: Event):
        logging.debug(f"Queued {event.type.value} at {event.time}")
        self.event_queue.push(event)

    # ------------------------------
    # Public Simulation Loop
    # ------------------------------
    def has_next(self) -> bool:
        upcoming = self.event_queue.peek()
        return upcoming is not None and upcoming.time <= self.config.max_time

    def step(self) -> EventRecord:
        event = self.event_queue.pop()
        self.clock = event.time
        follow_ons, record = self.processor.process(event, self.state)
        for new_event in follow_ons:
            self.schedule(new_event)

        for block in format_record(record):
            logging.info(block)
        self.summary.add(record)
        return record

    def run(self) -> RunSummary:
        if not self.seeded:
            self.seed()
        logging.debug(f"SimulationEngine started (horizon={self.config.max_time}, seed={self.streams.seed})")

        while self.has_next():
            self.step()

        logging.info("Simulation completed.")
        logging.debug(
            f"SimulationEngine finished: {self.summary.events_processed} events, "
            f"{self.summary.throughput()} units packaged, {len(self.event_queue)} events left past the horizon"
        )
        return self.summary
