"""
Helpers shared by model modules.
"""

import enum
from typing import List, Type


def enum_values(enum_cls: Type[enum.Enum]) -> List[str]:
    """Persist enum values ("in_progress") rather than member names ("IN_PROGRESS")."""
    return [member.value for member in enum_cls]
