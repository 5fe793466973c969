"""
Tuning constants for folder puddles.

Defaults match the look of the original graph view: a 30 unit margin around
the outermost member, repulsion that starts 100 units further out, and a
maximum push of 20 units per frame.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass
class ClusterConfig:
    """Geometry and force parameters shared by every cluster of a session."""
    padding: float = 30.0        # Visual margin added to the hull radius
    margin_min: float = 100.0    # Extra reach of the repulsion beyond the radius
    hull_force_k: float = 20.0   # Push at the center, fades to 0 at the edge
    show_polygon: bool = False   # Also emit the exact hull polygon (debug)

    def __post_init__(self):
        if self.padding < 0:
            raise ValueError(f"padding must be >= 0, got {self.padding}")
        if self.margin_min < 0:
            raise ValueError(f"margin_min must be >= 0, got {self.margin_min}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClusterConfig":
        """Create a config from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
