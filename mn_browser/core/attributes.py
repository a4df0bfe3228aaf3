from __future__ import annotations

from typing import Tuple

# ---------------------------------------------------------------------------
# Attribute universe
#
# Names are the wire names used by change batches and assembly files, so they
# keep their camelCase spelling.
# ---------------------------------------------------------------------------

# Reference to the file on the client's machine that is the current source.
SOURCE_ATTRIBUTES: Tuple[str, ...] = ("file",)

# Chemically-unique metabolites, the reactions that convert or transport them,
# and the genes, compartments and processes reactions refer to.
ENTITY_ATTRIBUTES: Tuple[str, ...] = (
    "metabolites",
    "reactions",
    "genes",
    "compartments",
    "processes",
)

# Attribution of entities to sets by their values of attributes, before
# (total) and after (current) filtration, plus the summary of set sizes.
SET_ATTRIBUTES: Tuple[str, ...] = (
    "totalReactionsSets",
    "totalMetabolitesSets",
    "setsSelections",
    "currentReactionsSets",
    "currentMetabolitesSets",
    "setsEntities",
    "setsFilter",
    "setsCardinalities",
    "setsSummary",
)

# Context and results for the selection of candidate entities.
CANDIDATE_ATTRIBUTES: Tuple[str, ...] = (
    "compartmentalization",
    "reactionsSimplifications",
    "metabolitesSimplifications",
    "reactionsCandidates",
    "metabolitesCandidates",
)

NETWORK_ATTRIBUTES: Tuple[str, ...] = (
    "networkNodesReactions",
    "networkNodesMetabolites",
    "networkLinks",
)

SUBNETWORK_ATTRIBUTES: Tuple[str, ...] = (
    "subNetworkNodesMetabolites",
    "subNetworkNodesReactions",
    "subNetworkLinks",
    "proximityFocus",
    "proximityDirection",
    "proximityDepth",
    "pathOrigin",
    "pathDestination",
    "pathDirection",
    "pathCount",
)

ATTRIBUTE_NAMES: Tuple[str, ...] = (
    SOURCE_ATTRIBUTES
    + ENTITY_ATTRIBUTES
    + SET_ATTRIBUTES
    + CANDIDATE_ATTRIBUTES
    + NETWORK_ATTRIBUTES
    + SUBNETWORK_ATTRIBUTES
)
