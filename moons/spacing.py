import numpy as np


class InvalidParameterError(ValueError):
    """Raised when a generator is called with parameters it cannot honour."""


def check_count(n, name, caller):
    """Reject counts below 2 or not representable as a finite integer."""
    if not n >= 2:
        raise InvalidParameterError(f"{caller} called with {name} < 2")
    if not np.isfinite(n) or int(n) != n:
        raise InvalidParameterError(f"{caller} called with non-integer {name}")
    return int(n)


def linspace(x1, x2, n):
    """Return `n` evenly spaced float32 samples over the closed interval [x1, x2]."""
    # bounds are compared after the cast, values that collapse to one float32 are rejected
    x1, x2 = np.float32(x1), np.float32(x2)
    if not x1 < x2:
        raise InvalidParameterError("linspace called with x1 >= x2")
    n = check_count(n, "n", "linspace")

    step = (x2 - x1) / np.float32(n - 1)
    return x1 + step * np.arange(n, dtype=np.float32)
