"""
Global constants for fixedvec.

Element kinds follow numpy's ``dtype.kind`` codes:
    "i" signed integer, "u" unsigned integer, "f" floating point.
"""
from __future__ import annotations

import numpy as np

# Element kinds a Vector may hold
ELEMENT_KINDS: tuple[str, ...] = ("i", "u", "f")

# Kinds that support abs() without wrapping (required by the norms)
SIGNED_KINDS: tuple[str, ...] = ("i", "f")

# Dtype used when none is given and none can be inferred (empty input)
DEFAULT_DTYPE = np.float64

# dot products and norms are accumulated in this dtype
ACCUMULATOR_DTYPE = np.float64

# Default tolerances for allclose()/Vector.isclose()
RTOL: float = 1e-9
ATOL: float = 1e-12

# Record format used by logging_config.setup_logging()
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"
