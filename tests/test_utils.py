"""Tests for the text and CSV artifacts."""

import pytest

from renorm_ising.main import main
from renorm_ising.renormalization import build_row, enumerate_rows, group_exponents
from renorm_ising.utils import (CSV_COLUMNS, EQUAL_LABEL, TABLE_HEADER, UNEQUAL_LABEL,
                                format_equation, format_row, load_table_csv, parse_equation,
                                renormalization_equations, save_table_csv, write_config_table,
                                write_equations)

EXPECTED_EQUATIONS = (
    "Exp[A(k)+2k'] = 14 Exp[-2 k]+ 16 Exp[2 k]+ 2 Exp[6 k]",
    "Exp[A(k)-2k'] = 2 Exp[-6 k]+ 16 Exp[-2 k]+ 14 Exp[2 k]",
)


@pytest.fixture(scope="module")
def rows():
    return enumerate_rows()


class TestConfigTable:

    def test_format_first_and_last_rows(self):
        assert format_row(build_row(0)) == " -1 -1 -1\t -1\t -1 -1 -1\t -1\t\t  6\t  2"
        assert format_row(build_row(63)) == "  1  1  1\t  1\t  1  1  1\t  1\t\t  6\t  2"

    def test_format_alternating_row(self):
        assert format_row(build_row(0b101010)) == "  1 -1  1\t  1\t -1  1 -1\t -1\t\t -6\t -2"

    def test_write_table(self, rows, tmp_path):
        filename = tmp_path / "cfg_out.txt"
        write_config_table(rows, str(filename))
        lines = filename.read_text().splitlines()
        assert len(lines) == 65
        assert lines[0] == TABLE_HEADER
        assert lines[1:] == [format_row(row) for row in rows]


class TestEquations:

    def test_equations(self, rows):
        assert renormalization_equations(group_exponents(rows)) == EXPECTED_EQUATIONS

    def test_single_term(self):
        assert format_equation(EQUAL_LABEL, {6: 2}) == "Exp[A(k)+2k'] = 2 Exp[6 k]"

    def test_parse(self):
        label, counts = parse_equation(EXPECTED_EQUATIONS[1])
        assert label == UNEQUAL_LABEL
        assert counts == {-6: 2, -2: 16, 2: 14}

    def test_parse_rejects_other_text(self):
        with pytest.raises(ValueError):
            parse_equation("s1 s2 s3")

    def test_write_equations(self, rows, tmp_path):
        filename = tmp_path / "renorm_out.txt"
        write_equations(group_exponents(rows), str(filename))
        assert filename.read_text() == "\n".join(EXPECTED_EQUATIONS) + "\n"


class TestCSV:

    def test_round_trip(self, rows, tmp_path):
        filename = tmp_path / "results" / "cfg_out.csv"
        save_table_csv(rows, str(filename))
        df = load_table_csv(str(filename))
        assert list(df.columns) == CSV_COLUMNS
        assert len(df) == 64
        assert list(df.iloc[63]) == [1, 1, 1, 1, 1, 1, 1, 1, 6, 2]
        assert df["H1"].tolist() == [row.H1 for row in rows]

    def test_missing_file(self, tmp_path, capsys):
        assert load_table_csv(str(tmp_path / "missing.csv")) is None
        assert "not found" in capsys.readouterr().out

    def test_missing_column(self, tmp_path, capsys):
        filename = tmp_path / "bad.csv"
        filename.write_text("s1,s2\n1,1\n")
        assert load_table_csv(str(filename)) is None
        assert "Missing column" in capsys.readouterr().out


class TestMain:

    def test_writes_artifacts(self, tmp_path, capsys):
        rows, table = main(output_dir=str(tmp_path), plot_filename="counts.png")
        assert len(rows) == 64
        assert table.total() == 64
        assert (tmp_path / "cfg_out.txt").exists()
        assert (tmp_path / "cfg_out.csv").exists()
        assert (tmp_path / "counts.png").exists()
        lines = (tmp_path / "renorm_out.txt").read_text().splitlines()
        assert tuple(lines) == EXPECTED_EQUATIONS
        out = capsys.readouterr().out
        assert EXPECTED_EQUATIONS[0] in out

    def test_unwritable_output(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("")
        with pytest.raises(OSError):
            main(output_dir=str(blocker / "sub"))
