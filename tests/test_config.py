"""Tests for GenerationPolicy, PolicyDraft and host settings loading."""

import dataclasses

import pytest

from passgen.config import (
    DEFAULT_POLICY,
    MAX_LENGTH,
    GenerationPolicy,
    PolicyDraft,
    policy_from_settings,
    snapshot_policy,
)


class TestPolicy:
    def test_defaults(self):
        assert DEFAULT_POLICY == GenerationPolicy(
            length=12,
            use_uppercase=True,
            use_numbers=True,
            use_symbols=True,
            exclude_similar=False,
            use_template=False,
            template_pattern="",
        )

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_POLICY.length = 20

    @pytest.mark.parametrize("length", [0, -3, MAX_LENGTH + 1])
    def test_length_out_of_range(self, length):
        with pytest.raises(ValueError, match="outside the supported range"):
            GenerationPolicy(length=length)

    @pytest.mark.parametrize("length", [True, 12.0, "12"])
    def test_length_must_be_int(self, length):
        with pytest.raises(ValueError, match="must be an integer"):
            GenerationPolicy(length=length)

    def test_engine_allows_lengths_outside_ui_range(self):
        assert GenerationPolicy(length=1).length == 1
        assert GenerationPolicy(length=MAX_LENGTH).length == MAX_LENGTH

    def test_pattern_must_be_str(self):
        with pytest.raises(TypeError):
            GenerationPolicy(template_pattern=None)

    @pytest.mark.parametrize(
        "use_template, pattern, expected",
        [
            (True, "LLDD", True),
            (True, "  \t", False),
            (True, "", False),
            (False, "LLDD", False),
        ],
    )
    def test_pattern_mode(self, use_template, pattern, expected):
        policy = GenerationPolicy(use_template=use_template, template_pattern=pattern)
        assert policy.pattern_mode is expected

    def test_character_set_count(self):
        assert DEFAULT_POLICY.character_set_count == 4
        assert GenerationPolicy(use_numbers=False, use_symbols=False).character_set_count == 2
        assert (
            GenerationPolicy(
                use_uppercase=False, use_numbers=False, use_symbols=False
            ).character_set_count
            == 1
        )


class TestSettings:
    def test_none_gives_defaults(self):
        assert policy_from_settings(None) is DEFAULT_POLICY
        assert policy_from_settings({}) is DEFAULT_POLICY

    def test_host_keys(self):
        policy = policy_from_settings(
            {
                "defaultLength": 20,
                "useSymbols": False,
                "excludeSimilar": True,
                "includePattern": True,
                "pattern": "UUDD",
            }
        )
        assert policy.length == 20
        assert policy.use_symbols is False
        assert policy.use_uppercase is True
        assert policy.exclude_similar is True
        assert policy.use_template is True
        assert policy.template_pattern == "UUDD"

    def test_field_names(self):
        policy = policy_from_settings({"length": 16, "use_numbers": False})
        assert policy.length == 16
        assert policy.use_numbers is False

    def test_unknown_keys_ignored(self):
        assert policy_from_settings({"theme": "dark"}) == DEFAULT_POLICY

    def test_invalid_value_rejected(self):
        with pytest.raises(ValueError):
            policy_from_settings({"defaultLength": 0})


class TestDraft:
    def test_round_trip_from_policy(self):
        policy = GenerationPolicy(length=18, use_template=True, template_pattern="LD")
        assert PolicyDraft.from_policy(policy).snapshot() == policy

    def test_snapshot_validates(self):
        draft = PolicyDraft(length=0)
        with pytest.raises(ValueError):
            draft.snapshot()

    def test_snapshot_policy(self):
        assert snapshot_policy(None) is DEFAULT_POLICY
        assert snapshot_policy(DEFAULT_POLICY) is DEFAULT_POLICY
        assert snapshot_policy(PolicyDraft(length=5)) == GenerationPolicy(length=5)
