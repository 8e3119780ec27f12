"""
Status transition guard for lifecycle entities.
"""

import enum
from typing import Dict, Set

from graybay.core.exceptions import ConflictError


def ensure_transition(
    entity: str,
    current: enum.Enum,
    target: enum.Enum,
    transitions: Dict[enum.Enum, Set[enum.Enum]],
) -> None:
    """
    Raise ConflictError unless `current -> target` is allowed.
    Re-applying the current status is always allowed.
    """
    if current == target:
        return
    if target not in transitions.get(current, set()):
        raise ConflictError(
            f"Cannot change {entity} status from {current.value} to {target.value}",
            details={
                "entity": entity,
                "from": current.value,
                "to": target.value,
                "allowed": sorted(status.value for status in transitions.get(current, set())),
            },
        )
