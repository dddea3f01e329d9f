#!/usr/bin/env python3
"""Safe math linting script for the fixedpoint package.

Scans the package for arithmetic patterns that would break determinism or
bypass the checked SafeInt collaborator. It should be run as part of CI to
prevent regressions.

Usage:
    python scripts/check_safe_math.py [--verbose] [--include-tests]

Exit codes:
    0 - No blocking issues found
    1 - CRITICAL or HIGH issues found (with details printed)
"""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

BASE_DIR = Path(__file__).parent.parent

# Directories to scan
SCAN_DIRS = ["fixedpoint"]

# Files/directories to completely skip
SKIP_PATHS = ["__pycache__"]

SEVERITIES = ("CRITICAL", "HIGH", "MEDIUM", "LOW")

# Allowlist: specific files where certain patterns are acceptable
# Format: {file_pattern: [list of allowed pattern names]}
ALLOWLIST = {
    # Cross-scale comparison multiplies unbounded ints and stores nothing
    "comparison.py": ["unchecked_raw_arithmetic"],
}


@dataclass
class Issue:
    """A detected unsafe math pattern."""

    file: Path
    line_num: int
    line: str
    pattern: str
    severity: str  # CRITICAL, HIGH, MEDIUM, LOW
    message: str
    suggestion: str | None = None


def should_skip_file(path: Path) -> bool:
    """Check if file should be completely skipped."""
    path_str = str(path)
    return any(skip in path_str for skip in SKIP_PATHS)


def is_allowlisted(path: Path, pattern_name: str) -> bool:
    """Check if a pattern is allowlisted for this file."""
    path_str = str(path)
    for file_pattern, allowed in ALLOWLIST.items():
        if file_pattern in path_str and pattern_name in allowed:
            return True
    return False


class DocstringTracker:
    """Track docstring state across multiple lines."""

    def __init__(self) -> None:
        self.in_docstring = False
        self.docstring_char: str | None = None

    def process_line(self, line: str) -> tuple[str, bool]:
        """Process a line and return (stripped_line, is_in_docstring).

        Returns the line with strings/comments removed and whether
        the line is entirely within a docstring.
        """
        result = []
        i = 0
        line_start_in_docstring = self.in_docstring

        while i < len(line):
            if line[i : i + 3] in ('"""', "'''"):
                if not self.in_docstring:
                    self.in_docstring = True
                    self.docstring_char = line[i : i + 3]
                    result.append("   ")
                    i += 3
                    continue
                elif line[i : i + 3] == self.docstring_char:
                    self.in_docstring = False
                    self.docstring_char = None
                    result.append("   ")
                    i += 3
                    continue

            if self.in_docstring:
                result.append(" ")
                i += 1
                continue

            char = line[i]

            if char == "#":
                result.append(" " * (len(line) - i))
                break

            if char in ('"', "'") and (i == 0 or line[i - 1] != "\\"):
                quote_char = char
                result.append(" ")
                i += 1
                while i < len(line):
                    if line[i] == quote_char and line[i - 1] != "\\":
                        result.append(" ")
                        i += 1
                        break
                    result.append(" ")
                    i += 1
                continue

            result.append(char)
            i += 1

        entirely_in_docstring = line_start_in_docstring and self.in_docstring

        return "".join(result), entirely_in_docstring


def _code_lines(lines: list[str]) -> Iterator[tuple[int, str, str]]:
    """Yield (line_num, code, original) with comments, strings and docstrings blanked."""
    tracker = DocstringTracker()
    for i, original_line in enumerate(lines, 1):
        if original_line.strip().startswith("#"):
            tracker.process_line(original_line)
            continue

        line, in_docstring = tracker.process_line(original_line)
        if in_docstring:
            continue
        yield i, line, original_line


def check_true_division(path: Path, lines: list[str]) -> Iterator[Issue]:
    """Check for true division that isn't floor division."""
    division_pattern = re.compile(r"(\w+|\))\s*/\s*(\w+|\()")

    for i, line, original_line in _code_lines(lines):
        if original_line.strip().startswith(("from ", "import ")):
            continue
        if "/" not in line:
            continue

        temp = line.replace("//", "XX")
        if "/" not in temp:
            continue

        if division_pattern.search(temp):
            yield Issue(
                file=path,
                line_num=i,
                line=original_line.rstrip(),
                pattern="true division",
                severity="HIGH",
                message="True division produces a float",
                suggestion="Use floor division on SafeInt: S(a) // b",
            )


def check_float_conversion(path: Path, lines: list[str]) -> Iterator[Issue]:
    """Check for float() and float literals in arithmetic."""
    for i, line, original_line in _code_lines(lines):
        if "float(" in line and 'float("inf")' not in original_line:
            yield Issue(
                file=path,
                line_num=i,
                line=original_line.rstrip(),
                pattern="float conversion",
                severity="CRITICAL",
                message="float() on a fixed-point value loses determinism",
                suggestion="Keep raw values as integers",
            )


def check_decimal_usage(path: Path, lines: list[str]) -> Iterator[Issue]:
    """Check for the decimal module, whose context makes rounding implicit."""
    pattern = re.compile(r"^\s*(from\s+decimal\s+import|import\s+decimal)\b")
    for i, line, original_line in _code_lines(lines):
        if pattern.search(line):
            yield Issue(
                file=path,
                line_num=i,
                line=original_line.rstrip(),
                pattern="decimal module",
                severity="HIGH",
                message="decimal.Decimal rounding depends on the active context",
                suggestion="Use FixedPoint with an explicit scale",
            )


def check_tolerance_patterns(path: Path, lines: list[str]) -> Iterator[Issue]:
    """Check for tolerance-based comparisons (excluding zero tolerance)."""
    abs_pattern = re.compile(r"abs\s*\([^)]+\)\s*[<>]=?\s*(\d+\.?\d*)")

    for i, line, original_line in _code_lines(lines):
        match = abs_pattern.search(line)
        if match and match.group(1) not in ("0", "1", "0.0", "1.0"):
            yield Issue(
                file=path,
                line_num=i,
                line=original_line.rstrip(),
                pattern="abs() tolerance",
                severity="CRITICAL",
                message=f"Tolerance-based comparison (tolerance={match.group(1)})",
                suggestion="Use exact integer comparison",
            )


def check_unchecked_raw_arithmetic(path: Path, lines: list[str]) -> Iterator[Issue]:
    """Check for + - * on raw values that bypass SafeInt."""
    pattern = re.compile(r"raw_value\s*[-+*]\s*\w|\w\s*[-+*]\s*\w+\.raw_value")

    for i, line, original_line in _code_lines(lines):
        if "S(" in line or not pattern.search(line):
            continue
        if is_allowlisted(path, "unchecked_raw_arithmetic"):
            continue
        yield Issue(
            file=path,
            line_num=i,
            line=original_line.rstrip(),
            pattern="unchecked raw arithmetic",
            severity="HIGH",
            message="Arithmetic on raw_value without overflow/underflow checks",
            suggestion="Wrap the operand: S(x.raw_value) + y",
        )


def scan_file(path: Path) -> list[Issue]:
    """Scan a single file for unsafe math patterns."""
    if should_skip_file(path):
        return []

    lines = path.read_text().split("\n")

    issues: list[Issue] = []
    issues.extend(check_true_division(path, lines))
    issues.extend(check_float_conversion(path, lines))
    issues.extend(check_decimal_usage(path, lines))
    issues.extend(check_tolerance_patterns(path, lines))
    issues.extend(check_unchecked_raw_arithmetic(path, lines))
    return issues


def scan_package(base_dir: Path = BASE_DIR) -> list[Issue]:
    """Scan every Python file under SCAN_DIRS."""
    issues: list[Issue] = []
    for scan_dir in SCAN_DIRS:
        dir_path = base_dir / scan_dir
        if dir_path.exists():
            for py_file in sorted(dir_path.rglob("*.py")):
                issues.extend(scan_file(py_file))
    return issues


def scan_tests(base_dir: Path = BASE_DIR) -> list[Issue]:
    """Scan test files for float conversions that could hide precision loss."""
    issues: list[Issue] = []
    test_dir = base_dir / "tests"
    if not test_dir.exists():
        return issues

    for py_file in sorted(test_dir.rglob("*.py")):
        for issue in check_float_conversion(py_file, py_file.read_text().split("\n")):
            issue.severity = "MEDIUM"
            issues.append(issue)
    return issues


def has_blocking(issues: list[Issue]) -> bool:
    """True if any issue is CRITICAL or HIGH."""
    return any(issue.severity in ("CRITICAL", "HIGH") for issue in issues)


def print_report(issues: list[Issue], verbose: bool) -> None:
    """Print the audit report."""
    if not issues:
        print("✓ No unsafe math patterns found!")
        return

    by_severity: dict[str, list[Issue]] = {sev: [] for sev in SEVERITIES}
    for issue in issues:
        by_severity[issue.severity].append(issue)

    print(f"\n{'=' * 70}")
    print("SAFE MATH AUDIT RESULTS")
    print(f"{'=' * 70}")
    for sev in SEVERITIES:
        count = len(by_severity[sev])
        if count > 0:
            print(f"  {sev:10} {count:4}")
    print(f"  {'TOTAL':10} {len(issues):4}")
    print(f"{'=' * 70}\n")

    for severity in SEVERITIES:
        items = by_severity[severity]
        if not items:
            continue

        print(f"\n[{severity}] {len(items)} issue(s):\n")
        for issue in items:
            rel_path = (
                issue.file.relative_to(Path.cwd())
                if issue.file.is_relative_to(Path.cwd())
                else issue.file
            )
            print(f"  {rel_path}:{issue.line_num}")
            print(f"    {issue.pattern}: {issue.message}")
            if verbose:
                print(f"    > {issue.line.strip()[:70]}")
                if issue.suggestion:
                    print(f"    Suggestion: {issue.suggestion}")
            print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Safe math linter for fixedpoint")
    parser.add_argument("--verbose", "-v", action="store_true")
    parser.add_argument("--include-tests", action="store_true")
    args = parser.parse_args(argv)

    issues = scan_package()
    if args.include_tests:
        issues.extend(scan_tests())

    print_report(issues, args.verbose)

    if has_blocking(issues):
        print("❌ Blocking issues found - must fix before commit")
        return 1
    print("✓ No blocking issues")
    return 0


if __name__ == "__main__":
    sys.exit(main())
