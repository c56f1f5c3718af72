import numpy as np
from itertools import product
from numba import njit

N_SPINS = 6
BLOCK_SIZE = 3
N_CONFIGS = 1 << N_SPINS

# =========================
# Configurations of the 6-spin ring
# =========================

# bit 5 -> s1, ..., bit 0 -> s6
_bit_shifts = np.arange(N_SPINS - 1, -1, -1, dtype=np.int64)


def configuration_from_index(k):
    """
    Spins (s1, ..., s6) encoded by the 6 bits of k.

    Args:
        k (int): Configuration index in [0, 63].

    Returns:
        np.ndarray: int64 array of +1/-1 values, s1 taken from the most significant bit.
    """
    if not 0 <= k < N_CONFIGS:
        raise ValueError(f"Configuration index must be in [0, {N_CONFIGS - 1}], got {k}")
    bits = (k >> _bit_shifts) & 1
    return np.where(bits == 1, 1, -1).astype(np.int64)


def index_from_configuration(spins):
    spins = np.asarray(spins, dtype=np.int64)
    if spins.shape != (N_SPINS,):
        raise ValueError(f"Expected {N_SPINS} spins, got shape {spins.shape}")
    bits = (spins == 1).astype(np.int64)
    return int(np.sum(bits << _bit_shifts))


def all_configurations():
    """All 64 configurations, row k being configuration k."""
    return np.array([configuration_from_index(k) for k in range(N_CONFIGS)], dtype=np.int64)

# =========================
# Majority rule (3-spin cell)
# =========================

_all_cells = np.array(list(product([-1, 1], repeat=BLOCK_SIZE)), dtype=np.int64)
plus_configs  = _all_cells[np.sum(_all_cells, axis=1) >  0]
minus_configs = _all_cells[np.sum(_all_cells, axis=1) <= 0]


@njit(cache=True)
def _majority_rule(spins):
    s = 0
    for i in range(spins.shape[0]):
        s += spins[i]
    # strict: a zero sum maps to -1
    if s > 0:
        return 1
    return -1


def majority_rule(spins):
    spins = np.asarray(spins, dtype=np.int64)
    if spins.ndim != 1 or spins.shape[0] == 0:
        raise ValueError("Majority rule needs a non-empty 1-D block of spins.")
    return int(_majority_rule(spins))


def coarse_grain(spins):
    """Block spins (s1', s2') from the first and last three sites."""
    spins = np.asarray(spins, dtype=np.int64)
    if spins.shape != (N_SPINS,):
        raise ValueError(f"Expected {N_SPINS} spins, got shape {spins.shape}")
    return (majority_rule(spins[:BLOCK_SIZE]), majority_rule(spins[BLOCK_SIZE:]))
