from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .attributes import ATTRIBUTE_NAMES


@dataclass(frozen=True)
class FeatureGroup:
    """
    A named set of attributes whose joint non-null presence gates a view.

    Fields:

    :param name: identifier used by the view table and State.readiness
    :param label: human-readable description
    :param attributes: the attributes this group adds on top of its parents
    :param requires: names of the lower groups this group builds on
    """
    name: str
    label: str
    attributes: Tuple[str, ...]
    requires: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ViewRequirement:
    """One row of the view table: the view to construct once its group is ready."""
    view_id: str
    group: str


def _declare(*groups: FeatureGroup) -> Dict[str, FeatureGroup]:
    """
    Build the ordered group table.

    Raises:
        ValueError: if a group repeats a name, requires a group not declared
        before it, or names an attribute outside the attribute universe
    """
    universe = set(ATTRIBUTE_NAMES)
    table: Dict[str, FeatureGroup] = {}
    for group in groups:
        if group.name in table:
            raise ValueError(f"Feature group '{group.name}' declared twice")
        for parent in group.requires:
            if parent not in table:
                raise ValueError(
                    f"Feature group '{group.name}' requires '{parent}' which is not declared before it"
                )
        unknown = [name for name in group.attributes if name not in universe]
        if unknown:
            raise ValueError(f"Feature group '{group.name}' names unknown attributes: {unknown}")
        table[group.name] = group
    return table


FEATURE_GROUPS: Dict[str, FeatureGroup] = _declare(
    FeatureGroup(
        name="entities_sets",
        label="Metabolic entities and sets",
        attributes=("metabolites", "reactions", "compartments", "genes", "processes"),
    ),
    FeatureGroup(
        name="total_sets",
        label="Attribution of all entities to sets",
        attributes=("totalReactionsSets", "totalMetabolitesSets"),
        requires=("entities_sets",),
    ),
    FeatureGroup(
        name="current_sets",
        label="Selections and attribution of filtered entities to sets",
        attributes=("setsSelections", "currentReactionsSets", "currentMetabolitesSets"),
        requires=("total_sets",),
    ),
    FeatureGroup(
        name="sets_cardinalities",
        label="Cardinalities of sets",
        attributes=("setsEntities", "setsFilter", "setsCardinalities", "setsSummary"),
        requires=("current_sets",),
    ),
    FeatureGroup(
        name="candidate_context",
        label="Context for candidate entities",
        attributes=("compartmentalization", "reactionsSimplifications", "metabolitesSimplifications"),
        requires=("current_sets",),
    ),
    FeatureGroup(
        name="candidate_entities",
        label="Candidate entities",
        attributes=("reactionsCandidates", "metabolitesCandidates"),
        requires=("candidate_context",),
    ),
    FeatureGroup(
        name="network_elements",
        label="Network nodes and links",
        attributes=("networkNodesReactions", "networkNodesMetabolites", "networkLinks"),
        requires=("candidate_entities",),
    ),
)

# The intake surface is shown whenever the most basic group is not ready.
FALLBACK_VIEW_ID = "source"
FALLBACK_GROUP = "entities_sets"

VIEW_REQUIREMENTS: Tuple[ViewRequirement, ...] = (
    ViewRequirement("state", "entities_sets"),
    ViewRequirement("summary", "total_sets"),
    ViewRequirement("filter", "current_sets"),
    ViewRequirement("set", "sets_cardinalities"),
    ViewRequirement("context", "candidate_context"),
    ViewRequirement("assembly", "candidate_entities"),
    ViewRequirement("topology", "network_elements"),
)


def ancestors(name: str, groups: Optional[Dict[str, FeatureGroup]] = None) -> Tuple[str, ...]:
    """
    All groups below `name` in the lattice, nearest-root first, without repeats.

    Raises:
        KeyError: if `name` is not a declared group
    """
    groups = FEATURE_GROUPS if groups is None else groups
    ordered: List[str] = []
    for parent in groups[name].requires:
        for ancestor in ancestors(parent, groups) + (parent,):
            if ancestor not in ordered:
                ordered.append(ancestor)
    return tuple(ordered)


def required_attributes(name: str, groups: Optional[Dict[str, FeatureGroup]] = None) -> Tuple[str, ...]:
    """Every attribute a group needs, its ancestors' attributes first."""
    groups = FEATURE_GROUPS if groups is None else groups
    ordered: List[str] = []
    for group_name in ancestors(name, groups) + (name,):
        for attribute in groups[group_name].attributes:
            if attribute not in ordered:
                ordered.append(attribute)
    return tuple(ordered)


def is_satisfied(name: str, model: Any, groups: Optional[Dict[str, FeatureGroup]] = None) -> bool:
    """
    True iff every attribute required by the group, including those of the
    groups it builds on, is present in the model with a non-None value.

    Each call re-reads the model; nothing is cached between predicates.
    """
    return all(model.has_value(attribute) for attribute in required_attributes(name, groups))
