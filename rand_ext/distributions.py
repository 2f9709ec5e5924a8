"""Exponential, Gaussian and Zipfian integer samplers over a caller-owned state."""

import math
from typing import Optional

from ._logging import get_logger
from .errors import InternalInvariantViolation, InvalidParameter, InvalidRange
from .prng import Erand48

logger = get_logger(__name__)

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

MIN_GAUSSIAN_PARAM = 2.0
MIN_ZIPFIAN_PARAM = 1.001
MAX_ZIPFIAN_PARAM = 1000.0

# Diagnostic only: a loop this long is logged once, never aborted.
REJECTION_WARNING_THRESHOLD = 100_000


def check_range(minimum: int, maximum: int) -> None:
    """Reject bounds that are reversed or do not fit in a signed 64-bit integer."""
    for bound in (minimum, maximum):
        if not INT64_MIN <= bound <= INT64_MAX:
            raise InvalidRange(f"bound {bound} does not fit in a signed 64-bit integer")
    if minimum > maximum:
        raise InvalidRange(f"min must not be greater than max (got [{minimum}, {maximum}])")


def check_parameter(distribution: str, parameter: float) -> None:
    """Reject a shape parameter outside the named distribution's domain."""
    if distribution == "exponential":
        if not (math.isfinite(parameter) and parameter > 0.0):
            raise InvalidParameter(
                f"exponential parameter must be greater than zero (not {parameter:f})"
            )
        if 1.0 - math.exp(-parameter) == 0.0:
            raise InvalidParameter(
                f"exponential parameter is too close to zero (not {parameter!r})"
            )
    elif distribution == "gaussian":
        if not (math.isfinite(parameter) and parameter >= MIN_GAUSSIAN_PARAM):
            raise InvalidParameter(
                f"gaussian parameter must be at least {MIN_GAUSSIAN_PARAM:.1f} (not {parameter:f})"
            )
    elif distribution == "zipfian":
        if not MIN_ZIPFIAN_PARAM <= parameter <= MAX_ZIPFIAN_PARAM:
            raise InvalidParameter(
                f"zipfian parameter must be in range [{MIN_ZIPFIAN_PARAM:.3f}, "
                f"{MAX_ZIPFIAN_PARAM:.0f}] (not {parameter:f})"
            )
    else:
        raise InvalidParameter(f"unknown distribution {distribution!r}")


def to_range(minimum: int, maximum: int, rand: float) -> int:
    """Scale ``rand`` in [0, 1) onto the inclusive range [minimum, maximum]."""
    span = maximum - minimum + 1
    # spans above 2**53 can round the product up to span itself
    return minimum + min(int(span * rand), span - 1)


def _count_rejection(sampler: str, rejections: int, max_rejections: Optional[int]) -> None:
    if max_rejections is not None and rejections > max_rejections:
        logger.error("rejection_cap_exceeded", sampler=sampler, max_rejections=max_rejections)
        raise InternalInvariantViolation(
            f"{sampler} sampler rejected {rejections} candidates (cap {max_rejections})"
        )
    if rejections == REJECTION_WARNING_THRESHOLD:
        logger.warning("rejection_loop_slow", sampler=sampler, rejections=rejections)


def exponential(state: Erand48, minimum: int, maximum: int, parameter: float) -> int:
    """Exponential draw where ``maximum`` keeps a residual density of exp(-parameter).

    Larger parameters pull the mass towards ``minimum``. One uniform draw, no loop.
    """
    check_range(minimum, maximum)
    check_parameter("exponential", parameter)

    cut = math.exp(-parameter)
    # next() is in [0, 1), uniform in (0, 1]
    uniform = 1.0 - state.next()
    rand = -math.log(cut + (1.0 - cut) * uniform) / parameter
    return to_range(minimum, maximum, rand)


def gaussian(
    state: Erand48,
    minimum: int,
    maximum: int,
    parameter: float,
    max_rejections: Optional[int] = None,
) -> int:
    """Gaussian draw centred on the middle of the range, cut at +/- ``parameter`` stdevs.

    Uses the basic Box-Muller transform and loops until the deviate falls in
    [-parameter, parameter). With parameter 2.0 about 8.6% of iterations are
    rejected, about 0.43% with 5.0.
    """
    check_range(minimum, maximum)
    check_parameter("gaussian", parameter)

    rejections = 0
    while True:
        # Box-Muller basic form takes both uniforms in (0, 1]
        rand1 = 1.0 - state.next()
        rand2 = 1.0 - state.next()
        stdev = math.sqrt(-2.0 * math.log(rand1)) * math.sin(2.0 * math.pi * rand2)
        if -parameter <= stdev < parameter:
            break
        # both uniforms are redrawn; the cos twin of a rejected pair is never used
        rejections += 1
        _count_rejection("gaussian", rejections, max_rejections)

    # divide first: stdev + parameter overflows for parameters near the float max
    rand = (stdev / parameter + 1.0) / 2.0
    return to_range(minimum, maximum, rand)


def _zipfian_rank(state: Erand48, n: int, s: float, max_rejections: Optional[int]) -> int:
    """Zipf rank in [1, n] by rejection.

    "Non-Uniform Random Variate Generation", Luc Devroye, p. 550-551,
    Springer 1986. Works for s > 1.0 but gets slow as s approaches 1.0.
    """
    exponent = s - 1.0
    b = 2.0 ** exponent
    log_limit = math.log(n + 1)

    rejections = 0
    while True:
        u = state.next()
        v = state.next()

        # u ** (-1/exponent) >= n + 1 is out of bounds; compared in log space so it cannot overflow
        if u > 0.0 and -math.log(u) / exponent < log_limit:
            x = math.floor(u ** (-1.0 / exponent))
            t = (1.0 + 1.0 / x) ** exponent
            if v * x * (t - 1.0) / (b - 1.0) <= t / b and x <= n:
                return x

        rejections += 1
        _count_rejection("zipfian", rejections, max_rejections)


def zipfian(
    state: Erand48,
    minimum: int,
    maximum: int,
    s: float,
    max_rejections: Optional[int] = None,
) -> int:
    """Zipfian draw where ``minimum`` is rank 1 and ``maximum`` is rank n."""
    check_range(minimum, maximum)
    check_parameter("zipfian", s)

    n = maximum - minimum + 1
    if n <= 1:
        return minimum
    return minimum - 1 + _zipfian_rank(state, n, s, max_rejections)
