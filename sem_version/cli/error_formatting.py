"""Error formatting for CLI output."""

from sem_version.versioning.exceptions import InvalidPatternError


def pretty_print_pattern_error(error: InvalidPatternError) -> str:
    """Format an InvalidPatternError to present useful information to the user.

    Displays the offending pattern with a marker under the position where
    compilation failed, followed by context information.

    Args:
        error: The InvalidPatternError to format

    Returns:
        A formatted error message

    Example output:
        Invalid minor pattern #2 '^feat(': missing ), unterminated subpattern
          --> .sem-version.yaml

          | ^feat(
          |     ^

          Tier: minor
          Pattern index: 2
    """
    message_parts = [str(error)]

    if error.config_path:
        message_parts.append(f"\n  --> {error.config_path}\n")
    else:
        message_parts.append("\n")

    message_parts.append(f"\n  | {error.pattern}\n")
    if error.position is not None:
        position = min(max(error.position, 0), len(error.pattern))
        message_parts.append(f"  | {' ' * position}^\n")

    context_parts = [f"  Tier: {error.tier}", f"  Pattern index: {error.index + 1}"]
    message_parts.append("\n" + "\n".join(context_parts))

    return "".join(message_parts)
