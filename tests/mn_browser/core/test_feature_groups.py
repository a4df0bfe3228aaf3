from __future__ import annotations

import pytest

from mn_browser.core.attributes import ATTRIBUTE_NAMES
from mn_browser.core.feature_groups import (
    FALLBACK_GROUP,
    FEATURE_GROUPS,
    VIEW_REQUIREMENTS,
    FeatureGroup,
    _declare,
    ancestors,
    is_satisfied,
    required_attributes,
)
from mn_browser.core.model import Model


def _model_with(names, value="v"):
    model = Model()
    model.merge([{"attribute": name, "value": value} for name in names])
    return model


def test_entities_sets_attributes():
    assert required_attributes("entities_sets") == (
        "metabolites", "reactions", "compartments", "genes", "processes",
    )
    assert FALLBACK_GROUP == "entities_sets"


def test_required_attributes_include_ancestors_first():
    attrs = required_attributes("candidate_entities")
    assert attrs[:5] == required_attributes("entities_sets")
    assert attrs[-2:] == ("reactionsCandidates", "metabolitesCandidates")
    assert "setsCardinalities" not in attrs
    assert len(attrs) == len(set(attrs))


def test_ancestors_follow_the_lattice():
    assert ancestors("entities_sets") == ()
    assert ancestors("sets_cardinalities") == ("entities_sets", "total_sets", "current_sets")
    assert ancestors("network_elements") == (
        "entities_sets", "total_sets", "current_sets", "candidate_context", "candidate_entities",
    )


def test_every_group_and_view_names_known_things():
    for group in FEATURE_GROUPS.values():
        assert set(group.attributes) <= set(ATTRIBUTE_NAMES)
    for requirement in VIEW_REQUIREMENTS:
        assert requirement.group in FEATURE_GROUPS
    view_ids = [r.view_id for r in VIEW_REQUIREMENTS]
    assert len(view_ids) == len(set(view_ids))


@pytest.mark.parametrize("name", list(FEATURE_GROUPS))
def test_group_is_satisfied_only_with_every_required_attribute(name):
    attrs = required_attributes(name)
    assert is_satisfied(name, _model_with(attrs))

    for missing in attrs:
        partial = _model_with([a for a in attrs if a != missing])
        assert not is_satisfied(name, partial)


@pytest.mark.parametrize("name", list(FEATURE_GROUPS))
def test_higher_group_never_holds_without_its_parents(name):
    # Only the group's own attributes: parents are unsatisfied, so is the group.
    group = FEATURE_GROUPS[name]
    if not group.requires:
        pytest.skip("root group")
    model = _model_with(group.attributes)
    assert not is_satisfied(name, model)


def test_none_and_falsy_values():
    attrs = required_attributes("candidate_context")
    model = _model_with(attrs)
    model.merge([{"attribute": "compartmentalization", "value": False}])
    # False is a value, only None (or absence) means "not ready"
    assert is_satisfied("candidate_context", model)

    model.merge([{"attribute": "compartmentalization", "value": None}])
    assert not is_satisfied("candidate_context", model)


def test_declare_rejects_bad_tables():
    with pytest.raises(ValueError):
        _declare(FeatureGroup("a", "A", ("genes",), requires=("b",)))
    with pytest.raises(ValueError):
        _declare(FeatureGroup("a", "A", ("notAnAttribute",)))
    with pytest.raises(ValueError):
        _declare(FeatureGroup("a", "A", ("genes",)), FeatureGroup("a", "A", ("genes",)))
