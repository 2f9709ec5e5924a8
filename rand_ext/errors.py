"""Error kinds reported by the samplers and the seeding helper."""


class RandExtError(Exception):
    """Base class for every error raised by rand_ext."""


class InvalidParameter(RandExtError, ValueError):
    """Shape parameter outside the distribution's valid domain."""


class InvalidRange(RandExtError, ValueError):
    """Bounds with min > max, or outside the signed 64-bit range."""


class SeedingFailed(RandExtError, RuntimeError):
    """The entropy source could not produce a usable seed."""


class InternalInvariantViolation(RandExtError, RuntimeError):
    """A rejection loop exceeded its explicit safety cap."""
