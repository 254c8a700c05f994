"""
Resource accumulation

Collects everything the template needs while the tiles are walked. All
lists keep generation order (tile order, then object order) and are only
joined when the resource text is rendered.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .coordinates import AutotileCoordinate
from .shapes import ShapeRecord


@dataclass(frozen=True)
class ShapeAssignment:
    """One entry of 0/shapes: which collision shape a tile uses."""
    coordinate: AutotileCoordinate
    one_way: bool
    shape_id: int


@dataclass
class ResourceAccumulator:
    shape_resources: List[ShapeRecord] = field(default_factory=list)
    shape_assignments: List[ShapeAssignment] = field(default_factory=list)
    navpoly_map: List[Tuple[AutotileCoordinate, int]] = field(default_factory=list)
    z_index_map: List[Tuple[int, int, float]] = field(default_factory=list)
    first_shape_id: Optional[int] = None

    def add_collision(self, record: ShapeRecord, coordinate: AutotileCoordinate,
                      one_way: bool):
        self.shape_resources.append(record)
        if self.first_shape_id is None:
            self.first_shape_id = record.identifier
        self.shape_assignments.append(
            ShapeAssignment(coordinate, one_way, record.identifier)
        )

    def add_navigation(self, record: ShapeRecord, coordinate: AutotileCoordinate):
        self.shape_resources.append(record)
        self.navpoly_map.append((coordinate, record.identifier))

    def add_z_index(self, coordinate: AutotileCoordinate, z_index: float):
        self.z_index_map.append((coordinate.x, coordinate.y, z_index))
