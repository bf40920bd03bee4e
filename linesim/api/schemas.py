# linesim/api/schemas.py

from pydantic import BaseModel, ConfigDict, Field, ValidationError, conint, confloat, model_validator
from typing import Any, Dict, Optional, Tuple

from linesim.errors import InvalidConfiguration


# -----------------------------
# 1. Machine Counts (one divisor per stage)
# -----------------------------
class MachineCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_material: conint(gt=0) = Field(..., description="Machines for raw material handling")
    machining: conint(gt=0) = Field(..., description="Machines for machining")
    assembly: conint(gt=0) = Field(..., description="Machines for assembly")
    quality_control: conint(gt=0) = Field(..., description="Machines for quality control")
    packaging: conint(gt=0) = Field(..., description="Machines for packaging")


# -----------------------------
# 2. Simulation Config (User Input Parameters)
# -----------------------------
class SimulationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    machine_counts: MachineCounts
    setup_time: conint(gt=0) = Field(..., description="Time units needed to retool machining for another product")
    maintenance_interval: conint(gt=0) = Field(..., description="Offset of the first scheduled maintenance")
    shift_length: conint(gt=0) = Field(..., description="Shift length; also the shift-end threshold")

    # Run horizon and line constants
    max_time: conint(gt=0) = Field(100, description="Last simulated time unit that is still processed")
    mean_interarrival: confloat(gt=0) = Field(4.5, description="Mean gap between arrivals of one product type")
    mean_time_between_failures: confloat(gt=0) = Field(50.0, description="Mean time until the machine failure")
    repair_time_range: Tuple[conint(gt=0), conint(gt=0)] = Field((30, 120), description="Min/Max repair time")
    maintenance_duration: conint(gt=0) = Field(60, description="Length of one recurring maintenance cycle")

    seed: Optional[int] = Field(None, description="Master seed; None draws from system entropy")

    @model_validator(mode="after")
    def _check_repair_range(self):
        low, high = self.repair_time_range
        if low > high:
            raise ValueError(f"repair_time_range low bound {low} exceeds high bound {high}")
        return self

    @property
    def arrival_rate(self) -> float:
        return 1.0 / self.mean_interarrival

    @property
    def failure_rate(self) -> float:
        return 1.0 / self.mean_time_between_failures


def parse_config(values: Dict[str, Any]) -> SimulationConfig:
    """
    Build a SimulationConfig from raw values (CLI answers, test dicts).

    Any validation failure is re-raised as InvalidConfiguration so callers
    only need to know about the simulator's own error types.
    """
    try:
        return SimulationConfig(**values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
            for err in exc.errors()
        )
        raise InvalidConfiguration(f"Invalid simulation configuration: {problems}") from exc
