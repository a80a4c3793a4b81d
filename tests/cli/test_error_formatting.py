import pytest

from sem_version.cli.error_formatting import pretty_print_pattern_error
from sem_version.versioning.exceptions import InvalidPatternError


@pytest.mark.short
def test_pretty_print_with_position_and_path():
    error = InvalidPatternError(
        "minor",
        "^feat(",
        1,
        "missing ), unterminated subpattern",
        position=5,
        config_path=".sem-version.yaml",
    )

    formatted = pretty_print_pattern_error(error)
    lines = formatted.splitlines()

    assert lines[0] == (
        "Invalid minor pattern #2 '^feat(': missing ), unterminated subpattern"
    )
    assert "  --> .sem-version.yaml" in lines
    assert "  | ^feat(" in lines
    assert "  |      ^" in lines
    assert lines[-2:] == ["  Tier: minor", "  Pattern index: 2"]


@pytest.mark.short
def test_pretty_print_without_position_or_path():
    error = InvalidPatternError("patch", "[", 0, "unterminated character set")

    formatted = pretty_print_pattern_error(error)

    assert "-->" not in formatted
    assert "  | [\n" in formatted
    assert "^\n" not in formatted
    assert formatted.endswith("  Tier: patch\n  Pattern index: 1")


@pytest.mark.short
def test_pretty_print_clamps_position():
    error = InvalidPatternError("major", "a(", 0, "oops", position=99)

    formatted = pretty_print_pattern_error(error)

    assert "  |   ^\n" in formatted
