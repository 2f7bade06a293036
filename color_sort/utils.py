import hashlib
import math

import numpy as np


def hash_state(state: np.ndarray) -> str:
    """
    Digest a state array into a stable key.

    Args:
        state (np.ndarray): The state to hash.

    Returns:
        str: SHA-256 hex digest, equal for equal layouts.
    """
    # bytes are taken in row order whatever the array's memory layout
    return hashlib.sha256(np.asarray(state).tobytes(order="C")).hexdigest()


def percent_label(fraction: float) -> str:
    """Whole percent, rounded down so only a finished tube or level reads 100%."""
    return f"{math.floor(fraction * 100.0)}%"
