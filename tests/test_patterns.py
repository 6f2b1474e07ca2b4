import dataclasses

import pytest

from showcase.domain.patterns import (
    HERO_PATTERN,
    AspectRatio,
    Pattern,
    PatternRegistry,
    SlotDef,
    validate_patterns,
)

EXPECTED_ORDER = [
    "hero_right",
    "duo_tall",
    "stack_3",
    "floating_2",
    "strip_3",
    "large_small",
    "quad_cluster",
    "vertical_pair",
    "single_portrait",
    "wide_landscape",
]


def test_catalog_order_is_stable():
    first = [p.name for p in PatternRegistry.get_patterns()]
    second = [p.name for p in PatternRegistry.get_patterns()]
    assert first == EXPECTED_ORDER
    assert second == EXPECTED_ORDER


def test_catalog_cannot_be_mutated_through_getter():
    patterns = PatternRegistry.get_patterns()
    patterns.clear()
    assert len(PatternRegistry.get_patterns()) == 10


def test_patterns_are_immutable():
    hero = PatternRegistry.get_patterns()[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        hero.name = "other"
    with pytest.raises(dataclasses.FrozenInstanceError):
        hero.slot_defs[0].x = 10.0


def test_catalog_shape():
    patterns = PatternRegistry.get_patterns()
    assert patterns[0].name == HERO_PATTERN
    assert {p.slots_needed for p in patterns} == {1, 2, 3, 4}
    assert {p.preferred_aspect for p in patterns} == {
        AspectRatio.ANY,
        AspectRatio.PORTRAIT,
        AspectRatio.LANDSCAPE,
    }
    for p in patterns:
        assert len(p.slot_defs) == p.slots_needed
        assert [s.z for s in p.slot_defs] == list(range(1, p.slots_needed + 1))


def test_hero_geometry():
    hero = PatternRegistry.get_patterns()[0]
    assert hero.slot_defs == (SlotDef(x=65.0, y=32.0, w=32.0, h=54.0, z=1, rot=0.0),)
    assert hero.preferred_aspect is AspectRatio.ANY


def test_pattern_rejects_slot_count_mismatch():
    with pytest.raises(ValueError, match="declares 2 slots"):
        Pattern(name="broken", slots_needed=2, slot_defs=(SlotDef(70, 20, 20, 20, 1, 0),))


def test_pattern_rejects_zero_slots():
    with pytest.raises(ValueError):
        Pattern(name="empty", slots_needed=0, slot_defs=())


def test_validate_rejects_empty_catalog():
    with pytest.raises(ValueError, match="empty"):
        validate_patterns([])


def test_validate_rejects_catalog_without_single_slot():
    duo = PatternRegistry.get_patterns()[1]
    with pytest.raises(ValueError, match="single-slot"):
        validate_patterns([duo])


def test_validate_rejects_duplicate_names():
    hero = PatternRegistry.get_patterns()[0]
    with pytest.raises(ValueError, match="hero_right"):
        validate_patterns([hero, hero])


def test_validate_accepts_builtin_catalog():
    validate_patterns(PatternRegistry.get_patterns())
