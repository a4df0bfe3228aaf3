from __future__ import annotations

import logging
import threading
from collections import deque
from typing import TYPE_CHECKING, Any, Deque, Dict, Iterable, Iterator, List, Optional, Tuple

from .attributes import ATTRIBUTE_NAMES
from .changes import ProposedChange
from .state import State

if TYPE_CHECKING:
    from .view_registry import ViewRegistry

logger = logging.getLogger(__name__)


class Model:
    """
    Model of the comprehensive state of the application.

    Holds every attribute that describes the application and knows which
    attribute names it accepts. The only way to change it is merge(), which
    drops anything outside the attribute universe and then evaluates a fresh
    State against the result.

    An attribute is either absent (never merged) or present with any value,
    None included. Readiness treats both absent and None as "not ready".

    Merge-then-evaluate cycles are serialized. A merge issued from inside a
    running cycle on the same thread (e.g. by a view under construction) is
    queued and runs as its own cycle once the current one completes. If a
    cycle raises, queued batches are kept and run ahead of the next merge,
    and state is reset to None.
    """

    def __init__(
            self,
            attribute_names: Iterable[str] = ATTRIBUTE_NAMES,
            registry: Optional[ViewRegistry] = None,
    ):
        names = tuple(attribute_names)
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Attribute names must be unique, got duplicates: {duplicates}")

        self._attribute_names: Tuple[str, ...] = names
        self._accepted = frozenset(names)
        self._values: Dict[str, Any] = {}

        self.registry = registry
        self.state: Optional[State] = None

        self._lock = threading.RLock()
        self._pending: Deque[List[Any]] = deque()
        self._in_cycle = False

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def attribute_names(self) -> Tuple[str, ...]:
        return self._attribute_names

    @property
    def lock(self):
        """Re-entrant lock held by every merge-then-evaluate cycle."""
        return self._lock

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def has_value(self, name: str) -> bool:
        """Present with a non-None value."""
        return self._values.get(name) is not None

    def as_dict(self) -> Dict[str, Any]:
        """Shallow copy of the current contents."""
        return dict(self._values)

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Model(present={sorted(self._values)})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def merge(self, changes: Iterable[Any]) -> Optional[State]:
        """
        Apply a batch of proposed changes, then evaluate a new State.

        Records are applied in order, later records winning over earlier ones.
        Records without both 'attribute' and 'value', and records naming an
        attribute outside the universe, are dropped silently.

        :param changes: ProposedChange objects or {"attribute", "value"} mappings
        :return: the State of the last evaluation this call ran, or None when
                 the batch was queued behind a cycle already running on this thread
        """
        batch = list(changes)
        with self._lock:
            self._pending.append(batch)
            if self._in_cycle:
                logger.debug("Merge queued behind running cycle (%d records)", len(batch))
                return None

            self._in_cycle = True
            try:
                while self._pending:
                    self._apply(self._pending.popleft())
                    self.state = State(self, self.registry)
            except Exception:
                # The store already holds the batch; no State describes it.
                self.state = None
                if self._pending:
                    logger.warning(
                        "Cycle failed; keeping %d queued batch(es) for the next merge",
                        len(self._pending),
                    )
                raise
            finally:
                self._in_cycle = False
            return self.state

    # Historical name of merge, kept for callers that restore a saved batch.
    restore = merge

    def _apply(self, batch: List[Any]) -> None:
        applied = 0
        dropped = 0
        for record in batch:
            change = ProposedChange.from_record(record)
            if change is None:
                logger.debug("Dropping malformed change record: %r", record)
                dropped += 1
                continue
            if not isinstance(change.attribute, str) or change.attribute not in self._accepted:
                logger.debug("Dropping change for unknown attribute %r", change.attribute)
                dropped += 1
                continue
            self._values[change.attribute] = change.value
            applied += 1

        logger.info(
            "Merged change batch",
            extra={"applied": applied, "dropped": dropped},
        )
