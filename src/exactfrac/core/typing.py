from __future__ import annotations

from typing import Union

import numpy as np

# Types accepted wherever an integer field is expected. Includes bool as subclass of int.
IntegerLike = Union[
    int,
    np.integer,
]

# Types accepted by the float constructors. np.float64 is also a float.
FloatLike = Union[
    float,
    np.floating,
]
