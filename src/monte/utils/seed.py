"""
Random seed management for reproducibility.
"""

from __future__ import annotations

import random
from typing import Optional
import numpy as np


def set_seed(seed: int) -> None:
    """
    Set global random seeds.

    Sets seeds for:
    - Python random
    - NumPy

    Args:
        seed: Random seed value
    """
    random.seed(seed)
    np.random.seed(seed)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create a random generator to inject into the engine.

    Args:
        seed: Random seed value (None = unseeded)
    """
    return np.random.default_rng(seed)
