"""
RenormIsing - sums of Boltzmann factors consistent with a coarse-graining condition.

Six spins of a 1-D periodic nearest-neighbour Ising chain (no field) are mapped by
majority rule onto a 2-spin periodic chain (no field):

    Exp[kH] => Exp[A(k) + k'H'],   H' = 2 s1' s2'

so that

    Exp[A(k) + 2k'] = sum of Exp[kH] consistent with s1' == s2'
    Exp[A(k) - 2k'] = sum of Exp[kH] consistent with s1' != s2'

{s1, s2, s3} -> s1' and {s4, s5, s6} -> s2'.
"""
import os

from .renormalization import renormalize, plot_exponent_counts
from .utils import (CFG_FILENAME, RENORM_FILENAME, CSV_FILENAME, renormalization_equations,
                    save_table_csv, write_config_table, write_equations)


def main(output_dir=".", plot_filename=None):
    rows, table = renormalize()

    os.makedirs(output_dir, exist_ok=True)
    write_config_table(rows, os.path.join(output_dir, CFG_FILENAME))
    save_table_csv(rows, os.path.join(output_dir, CSV_FILENAME))
    write_equations(table, os.path.join(output_dir, RENORM_FILENAME))

    for line in renormalization_equations(table):
        print(line)

    if plot_filename is not None:
        plot_exponent_counts(table, os.path.join(output_dir, plot_filename))

    return rows, table


if __name__ == "__main__":
    main()
