# linesim/simulation/timing.py

import math
from enum import Enum
from typing import Dict, List, Optional

from linesim.api.schemas import MachineCounts
from linesim.errors import InvalidProductType
from .random_source import NormalDistribution, RandomSource


class Stage(str, Enum):
    RAW_MATERIAL = "raw_material"
    MACHINING = "machining"
    ASSEMBLY = "assembly"
    QUALITY_CONTROL = "quality_control"
    PACKAGING = "packaging"


def to_time_units(value: float) -> int:
    """Round a continuous duration half up to whole time units, never below zero."""
    return max(0, math.floor(value + 0.5))


# Mean/stddev per stage, one entry per product type
DEFAULT_STAGE_TIMES: Dict[Stage, List[NormalDistribution]] = {
    Stage.RAW_MATERIAL: [NormalDistribution(mean=2.0, stddev=0.5), NormalDistribution(mean=3.0, stddev=0.6)],
    Stage.MACHINING: [NormalDistribution(mean=3.2, stddev=0.6), NormalDistribution(mean=4.0, stddev=0.7)],
    Stage.ASSEMBLY: [NormalDistribution(mean=2.5, stddev=0.5), NormalDistribution(mean=3.5, stddev=0.6)],
    Stage.QUALITY_CONTROL: [NormalDistribution(mean=1.5, stddev=0.3), NormalDistribution(mean=2.0, stddev=0.4)],
    Stage.PACKAGING: [NormalDistribution(mean=1.0, stddev=0.2), NormalDistribution(mean=1.5, stddev=0.3)],
}


class StageTimingTable:
    """
    Per-product, per-stage duration distributions plus the machine count
    of every stage.

    A stage with n machines finishes a unit n times faster: the sampled
    duration is divided by n before rounding with to_time_units().
    """

    def __init__(self, machine_counts: MachineCounts,
                 stage_times: Optional[Dict[Stage, List[NormalDistribution]]] = None):
        stage_times = DEFAULT_STAGE_TIMES if stage_times is None else stage_times
        missing = [stage.value for stage in Stage if stage not in stage_times]
        if missing:
            raise ValueError(f"No timing distributions for stage(s): {', '.join(missing)}")

        sizes = {len(dists) for dists in stage_times.values()}
        if len(sizes) != 1 or 0 in sizes:
            raise ValueError("Every stage needs one distribution per product type")

        self.machine_counts = machine_counts
        self._stage_times = {stage: list(stage_times[stage]) for stage in Stage}
        self.product_types = sizes.pop()

    def machine_count(self, stage: Stage) -> int:
        return getattr(self.machine_counts, stage.value)

    def distribution(self, stage: Stage, product_type: int) -> NormalDistribution:
        self.validate_product_type(product_type)
        return self._stage_times[stage][product_type]

    def duration(self, stage: Stage, product_type: int, source: RandomSource) -> int:
        sample = source.sample(self.distribution(stage, product_type))
        return to_time_units(sample / self.machine_count(stage))

    def validate_product_type(self, product_type: int):
        if not isinstance(product_type, int) or not 0 <= product_type < self.product_types:
            raise InvalidProductType(product_type, self.product_types)
