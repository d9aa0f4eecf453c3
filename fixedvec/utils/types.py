from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import NDArray, ArrayLike, DTypeLike

FloatArray = NDArray[np.floating]

# Any real number accepted as a vector element or a scaling factor
Scalar = Union[int, float, np.integer, np.floating]

__all__ = [
    "ArrayLike", "DTypeLike",
    "FloatArray",
    "Scalar",
]
