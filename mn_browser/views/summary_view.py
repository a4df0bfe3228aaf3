from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pandas as pd
import plotly.express as px
from dash import dcc

from mn_browser.core.base_view import BaseView
from ._panel import view_card

SET_KINDS = ("compartments", "processes")


class SummaryView(BaseView):
    """
    Bar chart of how many reactions belong to each compartment and process.

    Reads totalReactionsSets: reaction id -> {"compartments": [...], "processes": [...]}.
    Set ids are labelled with the 'name' from compartments/processes when present.
    """

    id = "summary"
    label = "Sets Summary"

    def compute_data(self) -> pd.DataFrame:
        reactions_sets = self.model.get("totalReactionsSets")
        rows = []
        if isinstance(reactions_sets, Mapping):
            for record in reactions_sets.values():
                if not isinstance(record, Mapping):
                    continue
                for kind in SET_KINDS:
                    values = record.get(kind)
                    if not isinstance(values, (list, tuple)):
                        continue
                    for value in values:
                        rows.append({"attribute": kind, "value": self._set_name(kind, value)})

        if not rows:
            return pd.DataFrame(columns=["attribute", "value", "count"])

        return (
            pd.DataFrame(rows)
            .groupby(["attribute", "value"], sort=True)
            .size()
            .reset_index(name="count")
        )

    def _set_name(self, kind: str, identifier: Any) -> str:
        sets = self.model.get(kind)
        if isinstance(sets, Mapping) and isinstance(identifier, (str, int)):
            record = sets.get(identifier)
            if isinstance(record, Mapping) and record.get("name"):
                return str(record["name"])
        return str(identifier)

    def render_figure(self, data: pd.DataFrame):
        if data.empty:
            return self.empty_figure("No reactions are attributed to sets")

        fig = px.bar(
            data,
            x="value",
            y="count",
            facet_col="attribute",
            labels={"value": "", "count": "Reactions"},
        )
        fig.update_xaxes(matches=None)
        fig.update_layout(title="Reactions per set", showlegend=False)
        return fig

    def render(self):
        return view_card(
            self.id,
            self.label,
            [dcc.Graph(figure=self.render_figure(self.compute_data()))],
        )
