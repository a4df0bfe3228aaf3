from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sized
from typing import TYPE_CHECKING, Any, List

import plotly.graph_objs as go
from dash.development.base_component import Component

if TYPE_CHECKING:
    from .model import Model


class BaseView(ABC):
    """
    Abstract base class for all views the State can construct.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used by the view table and the registry
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - used to read what the view needs from the Model
    - implement 'render' - used to build the Dash component for the view

    Views only read the Model. Any change they want goes through Model.merge.
    """

    id: str = None
    label: str = None

    def __init__(self, model: Model):
        self.model = model

    @abstractmethod
    def compute_data(self) -> Any:
        """
        Compute the data this view represents from the current Model
        :return: data: a dataframe or dict, depending on the view
        """
        raise NotImplementedError()

    @abstractmethod
    def render(self) -> Component:
        """
        Render the view from the data provided by {@link compute_data()}
        :return: the Dash component for this view
        """
        raise NotImplementedError()


    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    @staticmethod
    def count(value: Any) -> int:
        """
        Number of entries in a collection attribute, 0 for anything unsized.
        """
        if isinstance(value, Sized) and not isinstance(value, (str, bytes)):
            return len(value)
        return 0

    @staticmethod
    def records(value: Any) -> List[Mapping]:
        """
        The mapping entries of a list-of-records attribute, [] for anything else.
        """
        if isinstance(value, (list, tuple)):
            return [record for record in value if isinstance(record, Mapping)]
        return []

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
