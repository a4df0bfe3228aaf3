from __future__ import annotations

from typing import Any, List

import dash_bootstrap_components as dbc
from dash import html


def view_card(view_id: str, title: str, body: List[Any]) -> dbc.Card:
    """
    Shared card shell so every view lands in the views container with the same
    chrome and a stable id ("view-<id>").
    """
    return dbc.Card(
        [
            dbc.CardHeader(html.H5(title, className="mb-0")),
            dbc.CardBody(body),
        ],
        id=f"view-{view_id}",
        className="mb-3",
    )
