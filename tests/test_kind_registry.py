# tests/test_kind_registry.py
"""Tests for the kind/format registry."""

import pytest

from tagbridge.core.exceptions import ConfigurationError, DuplicateKindError
from tagbridge.core.models import OTHER_ROLE, REFERENCE_ROLE, Role
from tagbridge.core.registry import KindRegistry

pytestmark = pytest.mark.tier1


def test_register_definition_kind_has_no_roles():
    registry = KindRegistry()
    spec = registry.register("function", "f", "definition")

    assert spec.role is Role.DEFINITION
    assert spec.roles == ()
    assert not spec.has_roles
    assert spec.index == 0


def test_reference_and_other_kinds_carry_one_role():
    registry = KindRegistry()
    ref = registry.register("call", "c", "reference")
    other = registry.register("note", "n", "other")

    assert ref.roles == (REFERENCE_ROLE,)
    assert REFERENCE_ROLE.description == "reference"
    assert other.roles == (OTHER_ROLE,)
    assert OTHER_ROLE.description == "other symbol"


def test_role_is_classified_by_first_letter():
    registry = KindRegistry()
    assert registry.register("a", "a", "r").role is Role.REFERENCE
    assert registry.register("b", "b", "oops").role is Role.OTHER
    assert registry.register("c", "c", "d").role is Role.DEFINITION
    assert registry.register("d", "d", None).role is Role.DEFINITION
    assert registry.register("e", "e", "xyz").role is Role.DEFINITION


def test_register_requires_name_and_letter():
    registry = KindRegistry()

    with pytest.raises(ConfigurationError):
        registry.register(None, "f")

    with pytest.raises(ConfigurationError):
        registry.register("function", "")


def test_register_accepts_empty_letter_when_allowed():
    registry = KindRegistry()
    spec = registry.register("function", "", allow_empty_letter=True)
    assert spec.letter == ""


def test_duplicate_kind_is_rejected():
    registry = KindRegistry()
    registry.register("function", "f")

    with pytest.raises(DuplicateKindError):
        registry.register("function", "g")


def test_lookup_by_name_and_index():
    registry = KindRegistry()
    registry.register("function", "f")
    registry.register("call", "c", "r")

    assert registry.lookup_by_name("call").index == 1
    assert registry.lookup_by_index(0).name == "function"
    assert registry.lookup_by_name("missing") is None
    assert registry.lookup_by_index(2) is None
    assert registry.lookup_by_index(-1) is None


def test_set_format_without_values_is_noop():
    registry = KindRegistry()
    registry.register("function", "f")
    registry.set_format("function")

    assert registry.get_format("function") is None
    assert registry.lookup_by_name("function").prefix == ""


def test_set_format_merges_later_values():
    registry = KindRegistry()
    registry.register("call", "c", "r")

    registry.set_format("call", prefix="@")
    registry.set_format("call", summary_format="%C")
    registry.set_format("call", prefix="&")

    spec = registry.lookup_by_name("call")
    assert spec.prefix == "&"
    assert spec.summary_format == "%C"


def test_format_for_unregistered_kind_still_counts_as_prefix():
    registry = KindRegistry()
    registry.set_format("ghost", prefix="~")

    assert registry.lookup_by_name("ghost") is None
    assert registry.prefixes() == {"ghost": "~"}


@pytest.mark.parametrize("prefix", ["a b", "50%", "café", "\t"])
def test_invalid_prefix_is_rejected(prefix):
    registry = KindRegistry()
    with pytest.raises(ConfigurationError):
        registry.set_format("kind", prefix=prefix)


def test_registry_iterates_in_registration_order():
    registry = KindRegistry()
    for name in ("b", "a", "c"):
        registry.register(name, name)

    assert [k.name for k in registry] == ["b", "a", "c"]
    assert len(registry) == 3
    assert "a" in registry
