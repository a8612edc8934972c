from dataclasses import dataclass, field
from typing import Any, Dict

from common.utils.utils import utc_now


@dataclass
class Review:
    _id: str
    elementId: str
    comment: str
    rate: Any  # stored as supplied, no range check
    createdAt: str = field(default_factory=utc_now)  # ISO 8601, UTC

    def to_dict(self) -> Dict[str, Any]:
        return {
            "comment": self.comment,
            "rate": self.rate,
            "_id": self._id,
            "elementId": self.elementId,
            "createdAt": self.createdAt,
        }
