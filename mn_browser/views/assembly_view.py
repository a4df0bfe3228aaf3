from __future__ import annotations

from typing import Dict

import dash_bootstrap_components as dbc

from mn_browser.core.base_view import BaseView
from ._panel import view_card


class AssemblyView(BaseView):
    """
    Candidates available for assembly of the network, net of simplifications.
    """

    id = "assembly"
    label = "Network Assembly"

    def compute_data(self) -> Dict[str, Dict[str, int]]:
        data = {}
        for entities in ("reactions", "metabolites"):
            candidates = self.count(self.model.get(f"{entities}Candidates"))
            simplified = self.count(self.model.get(f"{entities}Simplifications"))
            data[entities] = {
                "candidates": candidates,
                "simplified": simplified,
                "represented": max(candidates - simplified, 0),
            }
        return data

    def render(self):
        data = self.compute_data()
        rows = [
            dbc.ListGroupItem(
                f"{entities.capitalize()}: {c['represented']} of {c['candidates']} candidates "
                f"({c['simplified']} simplified)"
            )
            for entities, c in data.items()
        ]
        return view_card(self.id, self.label, [dbc.ListGroup(rows, flush=True)])
