"""
Test Assertions
===============

Custom assertion helpers for rendered form output.
"""

from typing import List, Sequence


def output_lines(output: str) -> List[str]:
    """Split rendered output into lines, dropping the final line terminator."""
    assert output.endswith("\n"), "Rendered output must end with a newline"
    return output[:-1].split("\n")


def assert_lines_in_order(output: str, expected: Sequence[str]) -> None:
    """Assert that every expected line appears in output, in the given order."""
    lines = output_lines(output)
    position = 0
    for line in expected:
        try:
            position = lines.index(line, position) + 1
        except ValueError:
            raise AssertionError(f"Line {line!r} not found in order in output:\n{output}")


def assert_indented(output: str, allowed: Sequence[int] = (2, 4, 6, 8)) -> None:
    """Assert that every non-empty line starts with one of the allowed indentation widths."""
    for line in output_lines(output):
        if not line:
            continue
        indent = len(line) - len(line.lstrip(" "))
        assert indent in allowed, f"Unexpected indentation {indent} in line {line!r}"


__all__ = ["output_lines", "assert_lines_in_order", "assert_indented"]
