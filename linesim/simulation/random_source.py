# linesim/simulation/random_source.py

import random
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, confloat, conint, model_validator


# -----------------------------
# Distributions (built once, sampled many times)
# -----------------------------
class NormalDistribution(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean: float
    stddev: confloat(ge=0)

    def sample(self, rng: random.Random) -> float:
        return rng.normalvariate(self.mean, self.stddev)


class ExponentialDistribution(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate: confloat(gt=0)

    @classmethod
    def from_mean(cls, mean: float) -> "ExponentialDistribution":
        return cls(rate=1.0 / mean)

    def sample(self, rng: random.Random) -> float:
        return rng.expovariate(self.rate)


class UniformIntDistribution(BaseModel):
    """Integers in the closed range [low, high]."""

    model_config = ConfigDict(frozen=True)

    low: conint(ge=0)
    high: conint(ge=0)

    @model_validator(mode="after")
    def _ordered(self):
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        return self

    def sample(self, rng: random.Random) -> int:
        return rng.randint(self.low, self.high)


Distribution = Union[NormalDistribution, ExponentialDistribution, UniformIntDistribution]


class RandomSource:
    """
    One stateful uniform engine plus the samplers the line needs.

    Sampling advances the engine, so a source must not be shared between
    threads or between replications.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        # random.Random(None) seeds from system entropy
        self._rng = random.Random(seed)

    def sample(self, distribution: Distribution) -> Union[float, int]:
        return distribution.sample(self._rng)

    def sample_normal(self, mean: float, stddev: float) -> float:
        return self._rng.normalvariate(mean, stddev)

    def sample_exponential(self, rate: float) -> float:
        return self._rng.expovariate(rate)

    def sample_uniform_int(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)


class RandomStreams:
    """
    Independent, named random sources, one per sampling role.

    Every stream's seed is drawn from a master engine in ROLES order, so
    the number of draws made from one role never shifts the sequence seen
    by another.
    """

    ROLES = ("arrival", "stage", "failure", "repair")

    def __init__(self, seed: Optional[int] = None, **overrides: RandomSource):
        unknown = set(overrides) - set(self.ROLES)
        if unknown:
            raise KeyError(f"Unknown random stream role(s): {sorted(unknown)}")
        self.seed = seed
        master = random.Random(seed)
        self._sources: Dict[str, RandomSource] = {
            role: RandomSource(master.getrandbits(64)) for role in self.ROLES
        }
        self._sources.update(overrides)

    def __getitem__(self, role: str) -> RandomSource:
        return self._sources[role]

    @property
    def arrival(self) -> RandomSource:
        return self._sources["arrival"]

    @property
    def stage(self) -> RandomSource:
        return self._sources["stage"]

    @property
    def failure(self) -> RandomSource:
        return self._sources["failure"]

    @property
    def repair(self) -> RandomSource:
        return self._sources["repair"]
