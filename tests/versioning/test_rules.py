"""Tests for bump rule sets and pattern matching."""

import pytest
import yaml

from sem_version.versioning.exceptions import InvalidPatternError
from sem_version.versioning.rules import (
    DEFAULT_CONFIG_YAML,
    DEFAULT_MAJOR_PATTERNS,
    DEFAULT_MINOR_PATTERNS,
    DEFAULT_PATCH_PATTERNS,
    RuleSet,
    default_rule_set,
)
from sem_version.versioning.version import BumpType


@pytest.fixture
def rules():
    return default_rule_set()


@pytest.mark.short
class TestDefaultRuleSet:
    """Test the built-in Conventional Commits patterns."""

    def test_default_pattern_counts(self, rules):
        assert len(rules.major) == 3
        assert len(rules.minor) == 2
        assert len(rules.patch) == 5

    @pytest.mark.parametrize(
        "message",
        [
            "feat!: drop python 3.8",
            "feat(api)!: remove v1 endpoints",
            "fix: something\n\nBREAKING CHANGE: config keys renamed",
            "chore: bump deps\n\nBREAKING-CHANGE: new minimum version",
            "BREAKING CHANGE: in the subject",
        ],
    )
    def test_major_matches(self, rules, message):
        assert rules.match_major(message)
        assert rules.highest_tier(message) == BumpType.MAJOR

    @pytest.mark.parametrize(
        "message",
        [
            "feat: add login",
            "feat(auth): add login",
            "feature: add login",
            "feature(ui): new dialog",
        ],
    )
    def test_minor_matches(self, rules, message):
        assert rules.match_minor(message)
        assert not rules.match_major(message)
        assert rules.highest_tier(message) == BumpType.MINOR

    @pytest.mark.parametrize(
        "message",
        [
            "fix: null pointer",
            "fix(core): null pointer",
            "bugfix: race",
            "hotfix: prod outage",
            "refactor: split module",
            "perf(db): add index",
        ],
    )
    def test_patch_matches(self, rules, message):
        assert rules.match_patch(message)
        assert rules.highest_tier(message) == BumpType.PATCH

    @pytest.mark.parametrize(
        "message",
        [
            "docs: update readme",
            "chore: bump deps",
            "Merge branch 'main'",
            "",
            # Case-sensitive: no implicit folding of the raw message
            "Feat: add login",
            "FIX: typo",
        ],
    )
    def test_no_tier(self, rules, message):
        assert rules.highest_tier(message) == BumpType.NONE

    def test_breaking_marker_is_case_sensitive(self, rules):
        message = "fix: x\n\nbreaking change: nope"
        assert not rules.match_major(message)
        assert rules.highest_tier(message) == BumpType.PATCH

    def test_minor_and_patch_are_anchored_to_message_start(self, rules):
        """Body lines starting with feat: do not count; ^ is the message start."""
        message = "docs: changelog\n\nfeat: mentioned in body\nfix: also in body"
        assert not rules.match_minor(message)
        assert not rules.match_patch(message)
        assert rules.highest_tier(message) == BumpType.NONE

    def test_major_breaking_marker_found_anywhere(self, rules):
        message = "docs: notes\n\nSome text\nBREAKING CHANGE: removed flag"
        assert rules.highest_tier(message) == BumpType.MAJOR

    def test_message_matching_several_tiers_reports_highest(self, rules):
        message = "feat: new api\n\nBREAKING CHANGE: old api removed"
        assert rules.match_minor(message)
        assert rules.match_major(message)
        assert rules.highest_tier(message) == BumpType.MAJOR

    def test_to_dict(self, rules):
        assert rules.to_dict() == {
            "major": DEFAULT_MAJOR_PATTERNS,
            "minor": DEFAULT_MINOR_PATTERNS,
            "patch": DEFAULT_PATCH_PATTERNS,
        }

    def test_default_yaml_matches_defaults(self, rules):
        """The scaffold written by --init describes exactly the defaults."""
        assert yaml.safe_load(DEFAULT_CONFIG_YAML) == rules.to_dict()

    def test_default_yaml_is_commented(self):
        assert DEFAULT_CONFIG_YAML.startswith("# sem-version configuration")
        assert "# feat: or feat(scope):" in DEFAULT_CONFIG_YAML


@pytest.mark.short
class TestRuleSet:
    """Test building and querying custom rule sets."""

    def test_from_patterns_missing_tiers_are_empty(self):
        rules = RuleSet.from_patterns(major=["^break"])
        assert rules.minor == ()
        assert rules.patch == ()
        assert rules.highest_tier("feat: x") == BumpType.NONE
        assert rules.highest_tier("break: x") == BumpType.MAJOR

    def test_custom_patterns(self):
        rules = RuleSet.from_patterns(
            major=[r"\[major\]"], minor=[r"\[minor\]"], patch=[r".*"]
        )
        assert rules.highest_tier("Add thing [minor]") == BumpType.MINOR
        assert rules.highest_tier("anything") == BumpType.PATCH
        assert rules.highest_tier("x\n\n[major] y") == BumpType.MAJOR

    def test_matches_unknown_tier(self):
        with pytest.raises(ValueError, match="Unknown tier"):
            default_rule_set().matches("feat: x", "huge")

    def test_rule_set_is_immutable(self):
        rules = default_rule_set()
        with pytest.raises(AttributeError):
            rules.major = ()

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            RuleSet.from_patterns(
                major=["BREAKING CHANGE:"],
                minor=[r"^feat:", r"^feat(\(.+\)?:"],
            )
        error = exc_info.value
        assert error.tier == "minor"
        assert error.index == 1
        assert error.pattern == r"^feat(\(.+\)?:"
        assert error.position is not None
        assert "minor" in str(error)
        assert r"^feat(\(.+\)?:" in str(error)

    def test_invalid_pattern_in_later_tier_rejects_whole_rule_set(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            RuleSet.from_patterns(major=["ok"], minor=["ok"], patch=["[unclosed"])
        assert exc_info.value.tier == "patch"
        assert exc_info.value.index == 0
