from .vector import (
    Vector,
    vec2,
    vec3,
    allclose,
)
from .combine import (
    lerp,
    linear_combination,
)
