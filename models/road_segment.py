"""
models/road_segment.py
----------------------
Domain model for tolled road segments.
"""

from dataclasses import dataclass


@dataclass
class RoadSegment:
    """A classified stretch of road; segment_type drives rate determination."""
    segment_id: int
    length: int
    start_coordinate: str
    end_coordinate: str
    name: str
    segment_type: str

    def __str__(self) -> str:
        return f"{self.name} [{self.segment_type}] {self.start_coordinate} -> {self.end_coordinate}"
