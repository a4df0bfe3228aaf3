from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Tuple

from mn_browser.validation.errors import ValidationIssue, ValidationError

# Section of the assembly -> keys each section must carry.
ASSEMBLY_LAYOUT: Dict[str, Tuple[str, ...]] = {
    "entities": ("metabolites", "reactions"),
    "sets": ("compartments", "genes", "processes"),
}


def validate_assembly_dict(obj: Any) -> None:
    """
    Validate a raw assembly BEFORE it becomes a change batch.
    A rejected assembly never reaches the Model, so the store is not left
    holding half of an assembly.
    """
    issues: list[ValidationIssue] = []

    if not isinstance(obj, Mapping):
        raise ValidationError([ValidationIssue("ASSEMBLY_TYPE", "Assembly must be a JSON object.")])

    for section, keys in ASSEMBLY_LAYOUT.items():
        block = obj.get(section)
        if not isinstance(block, Mapping):
            issues.append(ValidationIssue(
                f"ASSEMBLY_{section.upper()}",
                f"{section} must be an object with keys {', '.join(keys)}.",
            ))
            continue
        for key in keys:
            if block.get(key) is None:
                issues.append(ValidationIssue(
                    f"ASSEMBLY_{key.upper()}",
                    f"{section}.{key} missing.",
                ))

    if issues:
        raise ValidationError(issues)
