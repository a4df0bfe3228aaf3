from __future__ import annotations

from typing import Any, Dict

from dash import html

from mn_browser.core.base_view import BaseView
from ._panel import view_card


class ContextView(BaseView):
    id = "context"
    label = "Candidate Context"

    def compute_data(self) -> Dict[str, Any]:
        return {
            "compartmentalization": bool(self.model.get("compartmentalization")),
            "reactions_simplified": self.count(self.model.get("reactionsSimplifications")),
            "metabolites_simplified": self.count(self.model.get("metabolitesSimplifications")),
        }

    def render(self):
        data = self.compute_data()
        compartments = "on" if data["compartmentalization"] else "off"
        return view_card(
            self.id,
            self.label,
            [
                html.P(f"Compartmentalization: {compartments}"),
                html.P(f"Simplified reactions: {data['reactions_simplified']}"),
                html.P(f"Simplified metabolites: {data['metabolites_simplified']}", className="mb-0"),
            ],
        )
