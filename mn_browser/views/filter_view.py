from __future__ import annotations

from typing import Any, Dict, List

import dash_bootstrap_components as dbc
import pandas as pd
from dash import html

from mn_browser.core.base_view import BaseView
from ._panel import view_card


class FilterView(BaseView):
    """
    Active selections of sets and the effect of filtration on entity counts.

    setsSelections is a list of {"attribute": ..., "value": ...} records.
    """

    id = "filter"
    label = "Filters"

    def compute_data(self) -> Dict[str, Any]:
        selections: List[Dict[str, Any]] = [
            {"attribute": s.get("attribute"), "value": s.get("value")}
            for s in self.records(self.model.get("setsSelections"))
        ]
        counts = pd.DataFrame(
            [
                {
                    "entities": "reactions",
                    "total": self.count(self.model.get("totalReactionsSets")),
                    "current": self.count(self.model.get("currentReactionsSets")),
                },
                {
                    "entities": "metabolites",
                    "total": self.count(self.model.get("totalMetabolitesSets")),
                    "current": self.count(self.model.get("currentMetabolitesSets")),
                },
            ]
        )
        return {"selections": selections, "counts": counts}

    def render(self):
        data = self.compute_data()
        if data["selections"]:
            selections = html.Ul(
                [html.Li(f"{s['attribute']}: {s['value']}") for s in data["selections"]]
            )
        else:
            selections = html.P("No sets selected; all entities pass.", className="text-muted")

        return view_card(
            self.id,
            self.label,
            [
                selections,
                dbc.Table.from_dataframe(data["counts"], striped=True, bordered=False, size="sm"),
            ],
        )
