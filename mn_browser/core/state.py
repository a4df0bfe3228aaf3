from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional

from .base_view import BaseView
from .feature_groups import (
    FALLBACK_GROUP,
    FALLBACK_VIEW_ID,
    FEATURE_GROUPS,
    VIEW_REQUIREMENTS,
    is_satisfied,
)

if TYPE_CHECKING:
    from .model import Model
    from .view_registry import ViewRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConstructionRequest:
    """
    Record of one view the State asked for during a pass.

    - view_id: id of the requested view
    - group: feature group that gated it, None for the fallback intake view
    """
    view_id: str
    group: Optional[str]


class State:
    """
    Representation of the application's state at one point in time.

    Constructing a State performs exactly one evaluation pass over the Model:
    - represent(): decide which views are constructible and construct them
    - act(): automatic actions triggered by the state just observed

    The pass only reads the Model. A fresh State is built after every merge,
    so views that are not ready yet simply appear on a later pass.
    """

    def __init__(self, model: Model, registry: Optional[ViewRegistry] = None):
        self.model = model
        self.registry = registry
        self.readiness: Dict[str, bool] = {}
        self.requests: List[ConstructionRequest] = []
        self.components: List[BaseView] = []

        self.represent()
        self.act()

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------
    def represent(self) -> None:
        """
        Evaluate every feature group and request the views whose groups are
        satisfied, in the fixed order of the view table. The intake view is
        requested first whenever the basic group is not ready.
        """
        for name in FEATURE_GROUPS:
            self.readiness[name] = self.determine(name)

        if not self.determine(FALLBACK_GROUP):
            self._request(FALLBACK_VIEW_ID, None)

        for requirement in VIEW_REQUIREMENTS:
            if self.determine(requirement.group):
                self._request(requirement.view_id, requirement.group)

        logger.info(
            "State evaluated",
            extra={
                "ready_groups": [name for name, ready in self.readiness.items() if ready],
                "requested_views": [r.view_id for r in self.requests],
            },
        )

    def determine(self, group: str) -> bool:
        """Re-evaluate one feature group against the live Model."""
        return is_satisfied(group, self.model)

    def _request(self, view_id: str, group: Optional[str]) -> None:
        self.requests.append(ConstructionRequest(view_id=view_id, group=group))

        if self.registry is None:
            return
        if not self.registry.has(view_id):
            logger.warning("No view registered for '%s'; skipping construction", view_id)
            return

        logger.debug("Constructing view '%s' (group=%s)", view_id, group)
        self.components.append(self.registry.create(view_id, self.model))

    # ------------------------------------------------------------------
    # Automatic actions
    # ------------------------------------------------------------------
    def act(self) -> None:
        """
        Hook for automatic actions triggered by the state just observed, such
        as deriving attributes. No automatic actions are defined yet.
        """

    @property
    def view_ids(self) -> List[str]:
        return [request.view_id for request in self.requests]


def evaluate(model: Model, registry: Optional[ViewRegistry] = None) -> State:
    """Run one evaluation pass over the Model and return its State."""
    return State(model, registry)
