"""Public package surface for the rand_ext non-uniform integer samplers."""

from .batch import BatchConfig, run_batch
from .distributions import (
    MAX_ZIPFIAN_PARAM,
    MIN_GAUSSIAN_PARAM,
    MIN_ZIPFIAN_PARAM,
    exponential,
    gaussian,
    zipfian,
)
from .errors import (
    InternalInvariantViolation,
    InvalidParameter,
    InvalidRange,
    RandExtError,
    SeedingFailed,
)
from .prng import Erand48, seed_state

__all__ = [
    "BatchConfig",
    "Erand48",
    "InternalInvariantViolation",
    "InvalidParameter",
    "InvalidRange",
    "MAX_ZIPFIAN_PARAM",
    "MIN_GAUSSIAN_PARAM",
    "MIN_ZIPFIAN_PARAM",
    "RandExtError",
    "SeedingFailed",
    "exponential",
    "gaussian",
    "run_batch",
    "seed_state",
    "zipfian",
]
