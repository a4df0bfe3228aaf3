from .source_view import SourceView
from .state_view import StateView
from .summary_view import SummaryView
from .filter_view import FilterView
from .set_view import SetView
from .context_view import ContextView
from .assembly_view import AssemblyView
from .topology_view import TopologyView

__all__ = [
    "SourceView",
    "StateView",
    "SummaryView",
    "FilterView",
    "SetView",
    "ContextView",
    "AssemblyView",
    "TopologyView",
]
