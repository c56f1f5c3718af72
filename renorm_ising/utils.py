import os
import re
import pandas as pd

CFG_FILENAME = "cfg_out.txt"
RENORM_FILENAME = "renorm_out.txt"
CSV_FILENAME = "cfg_out.csv"

EQUAL_LABEL = "Exp[A(k)+2k']"
UNEQUAL_LABEL = "Exp[A(k)-2k']"

TABLE_HEADER = "s1 s2 s3\t s1'\ts4 s5 s6\ts2'\t\tH\t  H'"
CSV_COLUMNS = ["s1", "s2", "s3", "s4", "s5", "s6", "s1p", "s2p", "H1", "H2"]

_term = re.compile(r"(-?\d+) Exp\[(-?\d+) k\]")

# =========================
# Raw configuration table
# =========================

def format_row(row):
    s1, s2, s3, s4, s5, s6 = row.spins
    b1, b2 = row.block_spins
    return (f"{s1:3d}{s2:3d}{s3:3d}\t{b1:3d}\t"
            f"{s4:3d}{s5:3d}{s6:3d}\t{b2:3d}\t\t{row.H1:3d}\t{row.H2:3d}")


def write_config_table(rows, filename=CFG_FILENAME):
    with open(filename, "w") as f:
        f.write(TABLE_HEADER + "\n")
        for row in rows:
            f.write(format_row(row) + "\n")
    print(f"Raw configuration table saved to {filename}")

# =========================
# Renormalization equations
# =========================

def format_equation(label, counts):
    terms = "+ ".join(f"{count} Exp[{H} k]" for H, count in sorted(counts.items()))
    return f"{label} = {terms}"


def renormalization_equations(table):
    return (format_equation(EQUAL_LABEL, table.equal),
            format_equation(UNEQUAL_LABEL, table.unequal))


def write_equations(table, filename=RENORM_FILENAME):
    with open(filename, "w") as f:
        for line in renormalization_equations(table):
            f.write(line + "\n")
    print(f"Renormalization equations saved to {filename}")


def parse_equation(line):
    """
    Read one equation line back into its label and exponent counts.

    Args:
        line (str): e.g. "Exp[A(k)+2k'] = 14 Exp[-2 k]+ 16 Exp[2 k]".

    Returns:
        tuple: (label, {H: count}).
    """
    label, sep, rhs = line.strip().partition(" = ")
    if not sep:
        raise ValueError(f"Not a renormalization equation: {line!r}")
    counts = {int(H): int(count) for count, H in _term.findall(rhs)}
    return label, counts

# =========================
# CSV export
# =========================

def save_table_csv(rows, filename=CSV_FILENAME):
    """
    Save the raw configuration table to a CSV file.

    Args:
        rows (list): RenormRow instances in enumeration order.
        filename (str): Name of the file to save to (default: 'cfg_out.csv').
    """
    data = [list(row.spins) + list(row.block_spins) + [row.H1, row.H2] for row in rows]
    df = pd.DataFrame(data, columns=CSV_COLUMNS)
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    df.to_csv(filename, index=False)
    print(f"Results saved to {filename}")


def load_table_csv(filename=CSV_FILENAME):
    """
    Load the raw configuration table from a CSV file.

    Returns:
        pd.DataFrame or None if the file is missing or malformed.
    """
    try:
        df = pd.read_csv(filename)
        return df[CSV_COLUMNS]
    except FileNotFoundError:
        print(f"Error: File {filename} not found.")
        return None
    except KeyError as e:
        print(f"Error: Missing column {e} in {filename}.")
        return None
