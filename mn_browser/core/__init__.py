"""
Core domain layer: attribute universe, Model, feature groups, State,
view base class and the view registry
"""

from .attributes import ATTRIBUTE_NAMES
from .changes import ProposedChange
from .model import Model
from .state import ConstructionRequest, State, evaluate
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = [
    "ATTRIBUTE_NAMES",
    "ProposedChange",
    "Model",
    "ConstructionRequest",
    "State",
    "evaluate",
    "BaseView",
    "ViewRegistry",
]
