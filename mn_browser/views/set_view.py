from __future__ import annotations

import pandas as pd
import plotly.express as px
from dash import dcc

from mn_browser.core.base_view import BaseView
from ._panel import view_card


class SetView(BaseView):
    """
    Cardinalities of sets by entities' values of attributes.

    - setsCardinalities: list of {"attribute", "value", "count"} records
    - setsEntities: which entities are counted ("metabolites" or "reactions")
    - setsFilter: whether counts are taken after filtration
    """

    id = "set"
    label = "Sets"

    def compute_data(self) -> pd.DataFrame:
        rows = [
            {
                "attribute": str(r.get("attribute")),
                "value": str(r.get("value")),
                "count": r.get("count", 0),
            }
            for r in self.records(self.model.get("setsCardinalities"))
        ]
        return pd.DataFrame(rows, columns=["attribute", "value", "count"])

    def render_figure(self, data: pd.DataFrame):
        if data.empty:
            return self.empty_figure("No set cardinalities available")

        entities = self.model.get("setsEntities") or "entities"
        scope = "filtered" if self.model.get("setsFilter") else "all"

        fig = px.bar(
            data,
            x="count",
            y="value",
            color="attribute",
            orientation="h",
            labels={"value": "", "count": f"Count of {entities}"},
        )
        fig.update_layout(title=f"Set cardinalities ({entities}, {scope})")
        return fig

    def render(self):
        return view_card(
            self.id,
            self.label,
            [dcc.Graph(figure=self.render_figure(self.compute_data()))],
        )
