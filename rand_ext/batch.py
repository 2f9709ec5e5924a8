"""Repeated sampling runs driven by a single config, for workload generation."""

from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List, Optional

from ._logging import get_logger
from .distributions import check_parameter, check_range, exponential, gaussian, zipfian
from .errors import InvalidParameter
from .prng import Erand48, seed_state
from .report import SampleSummary

logger = get_logger(__name__)


def _exponential(state: Erand48, cfg: "BatchConfig") -> int:
    return exponential(state, cfg.minimum, cfg.maximum, cfg.parameter)


def _gaussian(state: Erand48, cfg: "BatchConfig") -> int:
    return gaussian(state, cfg.minimum, cfg.maximum, cfg.parameter, cfg.max_rejections)


def _zipfian(state: Erand48, cfg: "BatchConfig") -> int:
    return zipfian(state, cfg.minimum, cfg.maximum, cfg.parameter, cfg.max_rejections)


SAMPLERS: Dict[str, Callable[[Erand48, "BatchConfig"], int]] = {
    "exponential": _exponential,
    "gaussian": _gaussian,
    "zipfian": _zipfian,
}


@dataclass
class BatchConfig:
    """Configuration for one batch of draws."""

    distribution: str = "exponential"
    minimum: int = 1
    maximum: int = 10
    parameter: float = 2.5
    count: int = 10_000
    seed: Optional[int] = None  # None seeds from OS entropy
    max_rejections: Optional[int] = None  # diagnostic cap for gaussian/zipfian loops


def run_batch(cfg: BatchConfig) -> Dict[str, Any]:
    """Draw ``cfg.count`` samples from one state and summarise them."""

    sampler = SAMPLERS.get(cfg.distribution)
    if sampler is None:
        raise InvalidParameter(
            f"unknown distribution {cfg.distribution!r} (expected one of {', '.join(SAMPLERS)})"
        )
    if cfg.count < 0:
        raise InvalidParameter(f"count must not be negative (not {cfg.count})")

    check_range(cfg.minimum, cfg.maximum)
    check_parameter(cfg.distribution, cfg.parameter)

    state = seed_state() if cfg.seed is None else Erand48(cfg.seed)

    logger.info(
        "batch_started",
        distribution=cfg.distribution,
        minimum=cfg.minimum,
        maximum=cfg.maximum,
        parameter=cfg.parameter,
        count=cfg.count,
        seeded=cfg.seed is not None,
    )
    samples: List[int] = [sampler(state, cfg) for _ in range(cfg.count)]
    summary = SampleSummary.from_samples(samples, cfg.minimum, cfg.maximum)
    logger.info("batch_finished", distribution=cfg.distribution, count=summary.count)

    return {
        "config": asdict(cfg),
        "summary": asdict(summary),
        "samples": samples,
    }


if __name__ == "__main__":
    import json

    result = run_batch(BatchConfig())
    print(json.dumps(result["summary"], indent=2))
