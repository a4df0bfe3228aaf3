from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ProposedChange:
    """
    One pending write request against the Model.

    - attribute: target attribute name
    - value: replacement value (None is a legitimate value and clears readiness)

    Proposed changes are transient: built by a controller, consumed once by
    Model.merge, then discarded.
    """
    attribute: str
    value: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"attribute": self.attribute, "value": self.value}

    @classmethod
    def from_record(cls, record: Any) -> Optional[ProposedChange]:
        """
        Build a change from a raw record, or return None when the record does
        not carry both an 'attribute' and a 'value' field.
        """
        if isinstance(record, ProposedChange):
            return record
        if isinstance(record, Mapping) and "attribute" in record and "value" in record:
            return cls(attribute=record["attribute"], value=record["value"])
        return None


def changes_from_mapping(values: Mapping[str, Any]) -> List[ProposedChange]:
    """Turn a plain {name: value} mapping into a batch, keeping insertion order."""
    return [ProposedChange(attribute=name, value=value) for name, value in values.items()]
