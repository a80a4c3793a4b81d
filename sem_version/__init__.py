"""sem-version: compute the next semantic version from commit history."""

__version__ = "0.3.0"
