from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict
import enum

# Placeholder id carried until a caller persists the conflict
UNSAVED_ID = 0


class ConflictType(enum.Enum):
    TIME_OVERLAP = "time_overlap"
    LOCATION_CONFLICT = "location_conflict"
    PLAYER_UNAVAILABLE = "player_unavailable"
    WEATHER = "weather"


class ConflictSeverity(enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class SchedulingConflict:
    """A detected collision for one game. Not persisted by detection."""
    game_id: int
    conflict_type: ConflictType
    severity: ConflictSeverity
    conflict_details: str
    resolved: bool = False
    id: int = UNSAVED_ID
    created_at: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'game_id': self.game_id,
            'conflict_type': self.conflict_type.value,
            'severity': self.severity.value,
            'conflict_details': self.conflict_details,
            'resolved': self.resolved,
            'created_at': self.created_at.isoformat()
        }
