"""Per-call entry points for a host engine.

Each call seeds its own state from OS entropy, so nothing is shared between
calls or threads.
"""

from .distributions import check_parameter, exponential, gaussian, zipfian
from .prng import seed_state


def random_exponential(lb: int, ub: int, param: float) -> int:
    return exponential(seed_state(), lb, ub, param)


def random_gaussian(lb: int, ub: int, param: float) -> int:
    return gaussian(seed_state(), lb, ub, param)


def random_zipfian(lb: int, ub: int, param: float) -> int:
    # parameter is checked before any entropy is read
    check_parameter("zipfian", param)
    return zipfian(seed_state(), lb, ub, param)
