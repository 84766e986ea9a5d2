from dataclasses import dataclass
from typing import Dict


@dataclass
class CandidateSlot:
    time: str  # HH:MM-HH:MM
    available_players: int
    conflicts: int

    def to_dict(self) -> Dict:
        return {
            'time': self.time,
            'available_players': self.available_players,
            'conflicts': self.conflicts
        }
