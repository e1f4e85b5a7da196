"""Shared typing aliases used across mcmcpairs."""

import numpy as np
import numpy.typing as npt

FloatArray = npt.NDArray[np.float64 | np.float32]
