"""Tests for the safe math lint script."""

from pathlib import Path

import pytest

from scripts.check_safe_math import (
    DocstringTracker,
    has_blocking,
    main,
    scan_file,
    scan_package,
)


def write_module(tmp_path: Path, source: str, name: str = "module.py") -> Path:
    path = tmp_path / name
    path.write_text(source)
    return path


class TestPackageIsClean:
    """The shipped package passes its own lint."""

    def test_no_issues(self):
        issues = scan_package()
        assert [f"{issue.file.name}:{issue.line_num} {issue.pattern}" for issue in issues] == []

    def test_main_exit_code(self, capsys):
        assert main([]) == 0
        assert "No blocking issues" in capsys.readouterr().out


class TestDetection:
    """Each check flags its pattern in synthetic modules."""

    def test_true_division(self, tmp_path):
        path = write_module(tmp_path, "half = value.raw_value / 2\n")
        issues = scan_file(path)
        assert [issue.pattern for issue in issues] == ["true division"]
        assert issues[0].line_num == 1

    def test_floor_division_is_fine(self, tmp_path):
        path = write_module(tmp_path, "half = S(value.raw_value) // 2\n")
        assert scan_file(path) == []

    def test_float_conversion(self, tmp_path):
        path = write_module(tmp_path, "price = float(value.to_raw())\n")
        issues = scan_file(path)
        assert [issue.severity for issue in issues] == ["CRITICAL"]

    def test_decimal_import(self, tmp_path):
        path = write_module(tmp_path, "from decimal import Decimal\n")
        assert [issue.pattern for issue in scan_file(path)] == ["decimal module"]

    def test_tolerance(self, tmp_path):
        path = write_module(tmp_path, "ok = abs(a - b) < 5\n")
        assert [issue.pattern for issue in scan_file(path)] == ["abs() tolerance"]

    def test_unchecked_raw_arithmetic(self, tmp_path):
        path = write_module(tmp_path, "total = a.raw_value + b.raw_value\n")
        issues = scan_file(path)
        assert [issue.pattern for issue in issues] == ["unchecked raw arithmetic"]
        assert has_blocking(issues)

    def test_allowlisted_file(self, tmp_path):
        path = write_module(tmp_path, "left = a.raw_value * scale\n", name="comparison.py")
        assert scan_file(path) == []

    def test_comments_and_docstrings_ignored(self, tmp_path):
        source = '"""Ratio a / b of two values."""\n\n# x = a.raw_value / 2\nlabel = "1/2"\n'
        path = write_module(tmp_path, source)
        assert scan_file(path) == []


class TestDocstringTracker:
    """Tests for string and docstring blanking."""

    def test_blanks_strings(self):
        line, in_docstring = DocstringTracker().process_line('x = "a / b"')
        assert "/" not in line
        assert not in_docstring

    @pytest.mark.parametrize("quote", ['"""', "'''"])
    def test_multiline_docstring(self, quote):
        tracker = DocstringTracker()
        tracker.process_line(f"{quote}Start")
        _, in_docstring = tracker.process_line("a / b")
        assert in_docstring
        tracker.process_line(quote)
        _, in_docstring = tracker.process_line("x = 1")
        assert not in_docstring
