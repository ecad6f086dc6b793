from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class UsernameRecord:
    """
    Class defining one entry of a player's username history.

    :ivar changed_to_at: When the player switched to this name, None for the
    original name.
    """
    name: str
    changed_to_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> UsernameRecord:
        """
        Construct a record from an entry of the names endpoint.

        :param d: A dict with 'name' and an optional 'changedToAt' in
        milliseconds since the epoch.
        :return: The corresponding record.
        """
        changed = d.get('changedToAt')
        if changed is not None:
            changed = datetime.fromtimestamp(changed / 1000)
        return cls(d['name'], changed)
