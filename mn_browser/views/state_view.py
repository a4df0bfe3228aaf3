from __future__ import annotations

from typing import Dict

import dash_bootstrap_components as dbc
from dash import html

from mn_browser.core.attributes import ENTITY_ATTRIBUTES
from mn_browser.core.base_view import BaseView
from ._panel import view_card


class StateView(BaseView):
    """
    Overview of the loaded metabolic entities and sets.

    Shown once metabolites, reactions, compartments, genes and processes are
    all available; the Restore control in the toolbar clears them again.
    """

    id = "state"
    label = "Entities and Sets"

    def compute_data(self) -> Dict[str, int]:
        return {name: self.count(self.model.get(name)) for name in ENTITY_ATTRIBUTES}

    def render(self):
        counts = self.compute_data()
        return view_card(
            self.id,
            self.label,
            [
                dbc.ListGroup(
                    [
                        dbc.ListGroupItem(
                            [html.Span(name.capitalize()), dbc.Badge(str(n), className="ms-2")]
                        )
                        for name, n in counts.items()
                    ],
                    flush=True,
                ),
            ],
        )
