"""Tests for envset.envfile.merge."""

import pytest

from envset.envfile import (
    ReplacementPolicy,
    parse_env,
    replace_all,
    serialize,
    set_key,
)


class TestSerialize:
    """Tests for rendering a mapping back to text."""

    def test_lines_joined_without_trailing_newline(self):
        assert serialize({"A": "1", "B": "x=y"}) == "A=1\nB=x=y"

    def test_empty_mapping(self):
        assert serialize({}) == ""


class TestSetKey:
    """Tests for the single-key set operation."""

    def test_existing_key_updated_in_place(self):
        """Test that an existing key keeps its position."""
        result = set_key(parse_env("A=1\nB=2"), "B", "3")

        assert result.changed is True
        assert result.text == "A=1\nB=3"

    def test_new_key_appended_last(self):
        """Test that a new key is added after existing keys."""
        result = set_key({"B": "2", "A": "1"}, "C", "3")

        assert list(result.env) == ["B", "A", "C"]
        assert result.text == "B=2\nA=1\nC=3"

    def test_same_value_is_unchanged(self):
        """Test that setting the current value reports no change."""
        env = parse_env("A=1")
        result = set_key(env, "A", "1")

        assert result.changed is False
        assert result.env == {"A": "1"}
        assert result.text == "A=1"

    def test_input_mapping_not_modified(self):
        """Test that set_key returns a new mapping."""
        env = {"A": "1"}
        set_key(env, "A", "2")
        set_key(env, "B", "2")

        assert env == {"A": "1"}

    def test_existing_key_with_empty_value(self):
        """Test that an empty stored value differs from a non-empty one."""
        result = set_key({"A": ""}, "A", "1")

        assert result.changed is True
        assert result.text == "A=1"


class TestReplaceAll:
    """Tests for the bulk replacement operation."""

    @pytest.fixture
    def base(self):
        return parse_env("A=1\nB=2")

    @pytest.fixture
    def replacements(self):
        return parse_env("B=9\nC=5")

    def test_defaults_update_and_backfill(self, base, replacements):
        """Test that unmatched keys are dropped and base keys backfilled."""
        result = replace_all(base, replacements, ReplacementPolicy())

        assert result.text == "B=9\nA=1"
        assert result.matched == 1

    def test_upsert_and_keep_only_replaced(self, base, replacements):
        """Test that only replacement keys remain, in replacement order."""
        policy = ReplacementPolicy(upsert=True, keep_only_replaced=True)
        result = replace_all(base, replacements, policy)

        assert result.text == "B=9\nC=5"
        assert result.matched == 2

    def test_upsert_with_backfill(self, base, replacements):
        """Test that upserted keys precede backfilled base keys."""
        result = replace_all(base, replacements, ReplacementPolicy(upsert=True))

        assert result.text == "B=9\nC=5\nA=1"

    def test_keep_only_replaced_without_upsert(self, base, replacements):
        """Test that only matched keys remain when upsert is off."""
        result = replace_all(base, replacements, ReplacementPolicy(keep_only_replaced=True))

        assert result.text == "B=9"

    def test_no_matches_keeps_only_replaced_gives_empty_file(self, base):
        """Test that nothing remains when nothing matched."""
        result = replace_all(base, {"Z": "0"}, ReplacementPolicy(keep_only_replaced=True))

        assert result.env == {}
        assert result.text == ""
        assert result.matched == 0

    def test_policy_defaults_to_no_upsert_and_backfill(self, base, replacements):
        """Test the default policy argument."""
        assert replace_all(base, replacements).text == "B=9\nA=1"

    def test_bulk_mode_always_changes(self, base):
        """Test that bulk mode always rewrites even with identical content."""
        result = replace_all(base, {"A": "1"})

        assert result.text == "A=1\nB=2"
        assert result.changed is True

    def test_inputs_not_modified(self, base, replacements):
        """Test that replace_all returns a new mapping."""
        replace_all(base, replacements, ReplacementPolicy(upsert=True))

        assert base == {"A": "1", "B": "2"}
        assert replacements == {"B": "9", "C": "5"}

    @pytest.mark.parametrize("upsert", [False, True])
    @pytest.mark.parametrize("keep_only_replaced", [False, True])
    def test_result_key_set(self, upsert, keep_only_replaced):
        """Test that the result holds exactly the matched and backfilled keys."""
        base = {"A": "1", "B": "2", "D": "4"}
        replacements = {"D": "40", "C": "30", "B": "20"}
        policy = ReplacementPolicy(upsert=upsert, keep_only_replaced=keep_only_replaced)

        result = replace_all(base, replacements, policy)

        matched = {k: v for k, v in replacements.items() if k in base or upsert}
        expected = dict(matched)
        if not keep_only_replaced:
            expected.update({k: v for k, v in base.items() if k not in matched})

        assert result.env == expected
        assert list(result.env) == list(expected)
        assert result.matched == len(matched)
