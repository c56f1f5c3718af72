import numpy as np
from numba import njit

# =========================
# Periodic nearest-neighbour energy
# =========================

@njit(cache=True)
def _bond_products(spins):
    n = spins.shape[0]
    P = np.empty(n, dtype=np.int64)
    for i in range(n):
        P[i] = spins[i] * spins[(i + 1) % n]
    return P


@njit(cache=True)
def _ring_energy(spins):
    n = spins.shape[0]
    E = 0
    for i in range(n):
        E += spins[i] * spins[(i + 1) % n]
    return E


def _as_ring(spins):
    spins = np.ascontiguousarray(spins, dtype=np.int64)
    if spins.ndim != 1 or spins.shape[0] < 2:
        raise ValueError("A periodic ring needs at least 2 spins.")
    return spins


def bond_products(spins):
    """s_i * s_{i+1} for every bond, the last one closing the ring."""
    return _bond_products(_as_ring(spins))


def ring_energy(spins):
    """
    Energy E = sum_i s_i s_{i+1} of a periodic ring, no field.

    The same function is used for the 6-spin chain (H) and for the
    2-spin block chain (H'), where both bonds join s1' and s2' so H' = 2 s1' s2'.

    Args:
        spins (array-like): +1/-1 values in ring order, length >= 2.

    Returns:
        int: The ring energy.
    """
    return int(_ring_energy(_as_ring(spins)))
