"""Tests for the CLI entry points by mocking sys.argv.

Covers every branch of both main() functions: equal (match, mismatch, null
token, null-as-empty), compare (each --type, rejected nulls, parse errors),
hash (one value, two values, too many), no command, and the frames CLI.
"""

from unittest.mock import patch

import pytest

from nullsafe_compare.cli import main
from nullsafe_compare.hashing import hashcode
from nullsafe_compare.tabular.cli import main as frames_main


def run_main(*args):
    """Run main() with args and return the printed lines."""
    with patch("sys.argv", ["nullsafe-compare", *args]):
        with patch("builtins.print") as mock_print:
            main()
    return [call[0][0] for call in mock_print.call_args_list]


def run_main_exit(*args):
    """Run main() expecting SystemExit, return (exit code, printed lines)."""
    with patch("sys.argv", ["nullsafe-compare", *args]):
        with patch("builtins.print") as mock_print:
            with pytest.raises(SystemExit) as exc_info:
                main()
    return exc_info.value.code, [call[0][0] for call in mock_print.call_args_list]


class TestEqualCommand:
    """Test equal command branches."""

    def test_equal(self):
        assert run_main("equal", "abc", "abc") == ["true"]

    def test_ignore_case(self):
        assert run_main("equal", "Straße", "STRAßE", "-i") == ["true"]

    def test_not_equal(self):
        code, lines = run_main_exit("equal", "abc", "ABC")
        assert code == 1
        assert lines == ["false"]

    def test_null_vs_empty(self):
        code, lines = run_main_exit("equal", "<null>", "")
        assert code == 1
        assert run_main("equal", "<null>", "", "--null-as-empty") == ["true"]

    def test_null_null(self):
        assert run_main("equal", "<null>", "<null>") == ["true"]

    def test_custom_null_token(self):
        assert run_main("--null-token", "NULL", "equal", "NULL", "", "--null-as-empty") == ["true"]


class TestCompareCommand:
    """Test compare command branches."""

    def test_natural(self):
        assert run_main("compare", "a", "b") == [-1]

    def test_natural_null_first(self):
        assert run_main("compare", "<null>", "a") == [-1]

    def test_int(self):
        assert run_main("compare", "10", "9", "--type", "int") == [1]

    def test_double(self):
        assert run_main("compare", "-0.0", "0.0", "--type", "double") == [-1]

    def test_bool(self):
        assert run_main("compare", "false", "true", "--type", "bool") == [-1]

    def test_bytes_signed(self):
        assert run_main("compare", "80", "01", "--type", "bytes") == [-1]

    def test_bytes_null_last(self):
        assert run_main("compare", "<null>", "01", "--type", "bytes") == [1]

    def test_primitive_rejects_null(self):
        code, lines = run_main_exit("compare", "<null>", "1", "--type", "int")
        assert code == 2
        assert lines[0].startswith("Error:")

    def test_parse_error(self):
        code, lines = run_main_exit("compare", "x", "1", "--type", "int")
        assert code == 2
        assert "Error:" in lines[0]

    def test_bad_bool(self):
        code, _ = run_main_exit("compare", "maybe", "true", "--type", "bool")
        assert code == 2

    def test_verbose(self):
        assert run_main("-v", "compare", "1", "1", "--type", "int") == [0]


class TestHashCommand:
    """Test hash command branches."""

    def test_single(self):
        assert run_main("hash", "<null>") == [0]
        assert run_main("hash", "abc") == [hashcode("abc")]

    def test_pair_cancels(self):
        assert run_main("hash", "abc", "abc") == [0]

    def test_too_many(self):
        with patch("sys.argv", ["nullsafe-compare", "hash", "a", "b", "c"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 2


class TestNoCommand:
    def test_no_command(self):
        code, _ = run_main_exit()
        assert code == 1


class TestFramesMain:
    """Test the frames CLI main()."""

    def test_report_printed(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_text("id,v\n1,1.0\n")
        with patch("sys.argv", ["nullsafe-compare-frames", str(path), str(path)]):
            with patch("builtins.print") as mock_print:
                frames_main()
        assert "Table Comparison Report" in mock_print.call_args_list[0][0][0]

    def test_output_dir(self, tmp_path):
        left = tmp_path / "left.csv"
        right = tmp_path / "right.csv"
        left.write_text("id,v\n1,1.0\n2,2.0\n")
        right.write_text("id,v\n1,1.05\n2,2.0\n")
        out = tmp_path / "out"
        argv = [
            "nullsafe-compare-frames", str(left), str(right),
            "--tolerance", "0.1", "--output-dir", str(out), "--progress",
        ]
        with patch("sys.argv", argv):
            with patch("builtins.print"):
                frames_main()
        assert (out / "comparison_report.txt").exists()

    def test_mismatch_exits_1(self, tmp_path):
        left = tmp_path / "left.csv"
        right = tmp_path / "right.csv"
        left.write_text("key,name\n1,a\n")
        right.write_text("key,name\n1,b\n")
        argv = ["nullsafe-compare-frames", str(left), str(right), "--id-col", "key"]
        with patch("sys.argv", argv):
            with patch("builtins.print"):
                with pytest.raises(SystemExit) as exc_info:
                    frames_main()
        assert exc_info.value.code == 1

    def test_missing_file_exits_2(self, tmp_path):
        argv = ["nullsafe-compare-frames", str(tmp_path / "a.csv"), str(tmp_path / "b.csv")]
        with patch("sys.argv", argv):
            with patch("builtins.print"):
                with pytest.raises(SystemExit) as exc_info:
                    frames_main()
        assert exc_info.value.code == 2

    def test_unwritable_output_dir_exits_2(self, tmp_path):
        """An output dir that is an existing file reports an error, no traceback."""
        path = tmp_path / "t.csv"
        path.write_text("id,v\n1,a\n")
        argv = ["nullsafe-compare-frames", str(path), str(path), "--output-dir", str(path)]
        with patch("sys.argv", argv):
            with patch("builtins.print") as mock_print:
                with pytest.raises(SystemExit) as exc_info:
                    frames_main()
        assert exc_info.value.code == 2
        assert mock_print.call_args_list[0][0][0].startswith("Error:")

    def test_negative_tolerance(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_text("id,v\n1,a\n")
        argv = ["nullsafe-compare-frames", str(path), str(path), "--tolerance", "-1"]
        with patch("sys.argv", argv):
            with pytest.raises(SystemExit) as exc_info:
                frames_main()
        assert exc_info.value.code == 2
