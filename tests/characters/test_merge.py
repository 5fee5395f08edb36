"""Tests for the character inheritance merge."""

from __future__ import annotations

from agentboot.characters.merge import ABSENT, ValueKind, kind_of, merge_characters, merge_values


class TestKindOf:
    """Tests for value classification."""

    def test_kinds(self):
        assert kind_of(ABSENT) is ValueKind.ABSENT
        assert kind_of({"a": 1}) is ValueKind.OBJECT
        assert kind_of([1]) is ValueKind.ARRAY
        assert kind_of("x") is ValueKind.SCALAR
        assert kind_of(None) is ValueKind.SCALAR
        assert kind_of(0) is ValueKind.SCALAR


class TestMergeValues:
    """Tests for pairwise value merging."""

    def test_lists_concatenate_base_first(self):
        assert merge_values([1, 2], [2, 3]) == [1, 2, 2, 3]

    def test_list_on_one_side_only(self):
        assert merge_values(ABSENT, ["a"]) == ["a"]
        assert merge_values(["a"], ABSENT) == ["a"]
        assert merge_values("scalar", ["a"]) == ["a"]
        assert merge_values(["a"], {"k": 1}) == ["a"]

    def test_child_scalar_wins(self):
        assert merge_values("base", "child") == "child"

    def test_absent_child_keeps_base(self):
        assert merge_values("base", ABSENT) == "base"

    def test_explicit_none_in_child_wins(self):
        assert merge_values("base", None) is None

    def test_object_replaced_by_scalar(self):
        assert merge_values({"a": 1}, "flat") == "flat"

    def test_both_absent(self):
        assert merge_values(ABSENT, ABSENT) is ABSENT


class TestMergeCharacters:
    """Tests for whole-character merging."""

    def test_lore_and_name_scenario(self):
        base = {"lore": ["A"], "name": "Base"}
        child = {"lore": ["B"], "name": "Child"}
        assert merge_characters(base, child) == {"lore": ["A", "B"], "name": "Child"}

    def test_nested_objects_recurse(self):
        base = {"settings": {"secrets": {"A": "1", "B": "2"}, "voice": {"model": "x"}}}
        child = {"settings": {"secrets": {"B": "3"}}}
        merged = merge_characters(base, child)
        assert merged["settings"]["secrets"] == {"A": "1", "B": "3"}
        assert merged["settings"]["voice"] == {"model": "x"}

    def test_nested_lists_concatenate(self):
        base = {"style": {"all": ["short"]}}
        child = {"style": {"all": ["witty"], "chat": ["friendly"]}}
        merged = merge_characters(base, child)
        assert merged["style"] == {"all": ["short", "witty"], "chat": ["friendly"]}

    def test_union_of_keys(self):
        merged = merge_characters({"bio": ["b"]}, {"topics": ["t"]})
        assert merged == {"bio": ["b"], "topics": ["t"]}

    def test_inputs_not_modified(self):
        base = {"lore": ["A"], "settings": {"secrets": {"X": "1"}}}
        child = {"lore": ["B"], "settings": {"secrets": {"Y": "2"}}}
        merge_characters(base, child)
        assert base == {"lore": ["A"], "settings": {"secrets": {"X": "1"}}}
        assert child == {"lore": ["B"], "settings": {"secrets": {"Y": "2"}}}

    def test_chained_merges_keep_child_scalars(self):
        child = {"name": "Child", "lore": ["C"]}
        merged = merge_characters({"name": "First", "lore": ["1"]}, child)
        merged = merge_characters({"name": "Second", "lore": ["2"]}, merged)
        assert merged["name"] == "Child"
        assert merged["lore"] == ["2", "1", "C"]

    def test_duplicates_not_removed(self):
        merged = merge_characters({"clients": ["discord"]}, {"clients": ["discord"]})
        assert merged["clients"] == ["discord", "discord"]
