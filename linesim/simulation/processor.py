# linesim/simulation/processor.py

import logging
from typing import List, Optional, Tuple

from linesim.api.schemas import SimulationConfig
from linesim.models.event import Event, EventRecord, EventType, MaintenanceOrigin, make_event
from linesim.models.resource_state import ResourceState
from .random_source import ExponentialDistribution, RandomStreams, UniformIntDistribution
from .timing import Stage, StageTimingTable, to_time_units

# Stage that finishes next after each per-unit step
NEXT_STAGE = {
    EventType.END_MACHINING: (Stage.ASSEMBLY, EventType.END_ASSEMBLY),
    EventType.END_ASSEMBLY: (Stage.QUALITY_CONTROL, EventType.END_QUALITY_CONTROL),
    EventType.END_QUALITY_CONTROL: (Stage.PACKAGING, EventType.END_PACKAGING),
}


class EventProcessor:
    """
    State machine that turns one dequeued event into its follow-on events.

    The processor holds no run state of its own: everything that must
    survive between events lives in the ResourceState passed to process().
    """

    def __init__(self, config: SimulationConfig, timing: StageTimingTable, streams: RandomStreams):
        self.config = config
        self.timing = timing
        self.streams = streams
        self.arrival_distribution = ExponentialDistribution(rate=config.arrival_rate)
        self.repair_distribution = UniformIntDistribution(
            low=config.repair_time_range[0], high=config.repair_time_range[1]
        )

    # ------------------------------
    # Public entry point
    # ------------------------------
    def process(self, event: Event, state: ResourceState) -> Tuple[List[Event], EventRecord]:
        if not event.type.is_machine_wide:
            self.timing.validate_product_type(event.product_type)

        if event.type == EventType.ARRIVAL:
            scheduled, note = self._handle_arrival(event), None
        elif event.type == EventType.END_RAW_MATERIAL:
            scheduled, note = self._handle_end_raw_material(event, state), None
        elif event.type == EventType.SETUP_CHANGE:
            scheduled, note = self._handle_setup_change(event, state), None
        elif event.type in NEXT_STAGE:
            scheduled, note = self._handle_stage_completion(event), None
        elif event.type == EventType.END_PACKAGING:
            scheduled, note = [], None
        elif event.type == EventType.MACHINE_FAILURE:
            scheduled, note = self._handle_machine_failure(event)
        else:
            scheduled, note = self._handle_maintenance(event, state)

        shift_maintenance = self._apply_shift_rule(event, state)
        if shift_maintenance is not None:
            scheduled.append(shift_maintenance)

        for new_event in scheduled:
            logging.debug(
                f"Scheduled {new_event.type.value} at {new_event.time} "
                f"(from {event.type.value} at {event.time})"
            )
        return scheduled, EventRecord.for_event(event, note)

    # ------------------------------
    # Per-unit transitions
    # ------------------------------
    def _handle_arrival(self, event: Event) -> List[Event]:
        gap = to_time_units(self.streams.arrival.sample(self.arrival_distribution))
        return [
            make_event(event.time + gap, EventType.ARRIVAL, event.product_type),
            self._finish_stage(event, Stage.RAW_MATERIAL, EventType.END_RAW_MATERIAL),
        ]

    def _handle_end_raw_material(self, event: Event, state: ResourceState) -> List[Event]:
        if not state.is_tooled_for(event.product_type):
            # machining must be retooled before this unit can be machined
            return [make_event(event.time + self.config.setup_time, EventType.SETUP_CHANGE, event.product_type)]
        return [self._finish_stage(event, Stage.MACHINING, EventType.END_MACHINING)]

    def _handle_setup_change(self, event: Event, state: ResourceState) -> List[Event]:
        state.current_setup = event.product_type
        logging.debug(f"Machining retooled for product {event.product_type} at {event.time}")
        return [self._finish_stage(event, Stage.MACHINING, EventType.END_MACHINING)]

    def _handle_stage_completion(self, event: Event) -> List[Event]:
        stage, next_type = NEXT_STAGE[event.type]
        return [self._finish_stage(event, stage, next_type)]

    def _finish_stage(self, event: Event, stage: Stage, next_type: EventType) -> Event:
        duration = self.timing.duration(stage, event.product_type, self.streams.stage)
        return make_event(event.time + duration, next_type, event.product_type)

    # ------------------------------
    # Machine-wide transitions
    # ------------------------------
    def _handle_machine_failure(self, event: Event) -> Tuple[List[Event], str]:
        repair_time = self.streams.repair.sample(self.repair_distribution)
        back_online = event.time + repair_time
        note = f"Machine failure occurred. Machine will be repaired and back online at time: {back_online}"
        return [make_event(back_online, EventType.MAINTENANCE, origin=MaintenanceOrigin.REPAIR)], note

    def _handle_maintenance(self, event: Event, state: ResourceState) -> Tuple[List[Event], str]:
        if event.is_shift_maintenance:
            # the shift rule may fire again; the recurring cycle runs on its own chain
            state.maintenance_scheduled = False
            return [], f"Shift-end maintenance performed at time: {event.time}"

        completed_at = event.time + self.config.maintenance_duration
        note = f"Maintenance scheduled. Maintenance will be completed at time: {completed_at}"
        return [make_event(completed_at, EventType.MAINTENANCE, origin=MaintenanceOrigin.CYCLE)], note

    def _apply_shift_rule(self, event: Event, state: ResourceState) -> Optional[Event]:
        if state.maintenance_scheduled or event.time < self.config.shift_length:
            return None
        state.maintenance_scheduled = True
        return make_event(event.time + self.config.shift_length, EventType.MAINTENANCE, origin=MaintenanceOrigin.SHIFT)
