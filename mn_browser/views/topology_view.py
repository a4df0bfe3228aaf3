from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Tuple

import numpy as np
import pandas as pd
import plotly.graph_objs as go
from dash import dcc

from mn_browser.core.base_view import BaseView
from ._panel import view_card

NODE_KINDS = (
    ("reaction", "networkNodesReactions"),
    ("metabolite", "networkNodesMetabolites"),
)


def _identifiers(value: Any) -> List[str]:
    """Node ids from either an id -> node mapping or a list of ids/nodes."""
    if isinstance(value, Mapping):
        return [str(key) for key in value]
    if isinstance(value, (list, tuple)):
        ids = []
        for node in value:
            if isinstance(node, Mapping):
                node = node.get("identifier")
            if node is not None:
                ids.append(str(node))
        return ids
    return []


class TopologyView(BaseView):
    """
    Node-link figure of the assembled network.

    Nodes are placed on a circle: all reactions first, then all metabolites,
    each in the order the model lists them. Links are read from networkLinks as
    {"source": node id, "target": node id} records, keyed by link id or listed.
    Links to unknown nodes are skipped.
    """

    id = "topology"
    label = "Network Topology"

    def compute_data(self) -> Tuple[pd.DataFrame, pd.DataFrame]:
        rows = [
            {"id": node_id, "kind": kind}
            for kind, attribute in NODE_KINDS
            for node_id in _identifiers(self.model.get(attribute))
        ]
        nodes = pd.DataFrame(rows, columns=["id", "kind"]).drop_duplicates("id")

        angles = np.linspace(0.0, 2.0 * np.pi, num=len(nodes), endpoint=False)
        nodes = nodes.assign(x=np.cos(angles), y=np.sin(angles)).reset_index(drop=True)

        raw_links = self.model.get("networkLinks")
        if isinstance(raw_links, Mapping):
            raw_links = list(raw_links.values())
        known = set(nodes["id"])
        links = pd.DataFrame(
            [
                {"source": str(link.get("source")), "target": str(link.get("target"))}
                for link in self.records(raw_links)
                if str(link.get("source")) in known and str(link.get("target")) in known
            ],
            columns=["source", "target"],
        )
        return nodes, links

    def render_figure(self, data: Tuple[pd.DataFrame, pd.DataFrame]) -> go.Figure:
        nodes, links = data
        if nodes.empty:
            return self.empty_figure("The network has no nodes")

        position = nodes.set_index("id")[["x", "y"]]
        edge_x: List[Any] = []
        edge_y: List[Any] = []
        for source, target in links.itertuples(index=False):
            edge_x += [position.at[source, "x"], position.at[target, "x"], None]
            edge_y += [position.at[source, "y"], position.at[target, "y"], None]

        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=edge_x,
            y=edge_y,
            mode="lines",
            line={"width": 1, "color": "#999"},
            hoverinfo="skip",
            showlegend=False,
        ))
        for kind, group in nodes.groupby("kind", sort=False):
            fig.add_trace(go.Scatter(
                x=group["x"],
                y=group["y"],
                mode="markers",
                name=kind,
                text=group["id"],
                hoverinfo="text",
                marker={"size": 10},
            ))
        fig.update_layout(
            title=f"Network: {len(nodes)} nodes, {len(links)} links",
            xaxis={"visible": False},
            yaxis={"visible": False, "scaleanchor": "x"},
        )
        return fig

    def render(self):
        return view_card(
            self.id,
            self.label,
            [dcc.Graph(figure=self.render_figure(self.compute_data()))],
        )
