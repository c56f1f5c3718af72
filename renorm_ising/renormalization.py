import numpy as np
import matplotlib.pyplot as plt
from typing import NamedTuple

from .blocks import N_CONFIGS, configuration_from_index, coarse_grain
from .energy import ring_energy


class RenormRow(NamedTuple):
    index: int
    spins: tuple
    block_spins: tuple
    H1: int
    H2: int

    @property
    def blocks_equal(self):
        return self.block_spins[0] == self.block_spins[1]


class ExponentTable(NamedTuple):
    # H1 -> number of configurations, keys ascending
    equal: dict
    unequal: dict

    def total(self):
        return sum(self.equal.values()) + sum(self.unequal.values())

# =========================
# Rows: configuration -> block spins -> energies
# =========================

def build_row(index):
    spins = configuration_from_index(index)
    block_spins = coarse_grain(spins)
    return RenormRow(
        index=index,
        spins=tuple(int(s) for s in spins),
        block_spins=block_spins,
        H1=ring_energy(spins),
        H2=ring_energy(np.array(block_spins)),
    )


def enumerate_rows():
    return [build_row(k) for k in range(N_CONFIGS)]

# =========================
# Grouping of Boltzmann exponents
# =========================

def _count_exponents(rows):
    counts = {}
    for row in rows:
        if row.H1 in counts:
            counts[row.H1] += 1
        else:
            counts[row.H1] = 1
    return dict(sorted(counts.items()))


def group_exponents(rows):
    """
    Count how often each exponent H appears in the two sums

        Exp[A(k) + 2k'] = sum of Exp[kH] over configurations with s1' == s2'
        Exp[A(k) - 2k'] = sum of Exp[kH] over configurations with s1' != s2'

    Args:
        rows (list): RenormRow instances.

    Returns:
        ExponentTable: {H: count} per class, ascending in H.
    """
    equal = [row for row in rows if row.blocks_equal]
    unequal = [row for row in rows if not row.blocks_equal]
    return ExponentTable(equal=_count_exponents(equal), unequal=_count_exponents(unequal))


def renormalize():
    """Rows of the full enumeration together with their grouped exponents."""
    rows = enumerate_rows()
    return rows, group_exponents(rows)

# =========================
# Plot
# =========================

def plot_exponent_counts(table, filename=None):
    keys = sorted(set(table.equal) | set(table.unequal))
    x = np.arange(len(keys))
    width = 0.4

    plt.figure()
    plt.bar(x - width / 2, [table.equal.get(h, 0) for h in keys], width,
            label="$s_1' = s_2'$")
    plt.bar(x + width / 2, [table.unequal.get(h, 0) for h in keys], width,
            label="$s_1' \\neq s_2'$")
    plt.xticks(x, [str(h) for h in keys])
    plt.xlabel('Exponent H')
    plt.ylabel('Number of configurations')
    plt.title('Boltzmann exponents grouped by block spins')
    plt.legend()
    plt.grid(True, axis='y')
    if filename is None:
        plt.show()
    else:
        plt.savefig(filename)
        plt.close()
        print(f"Plot saved to {filename}")
