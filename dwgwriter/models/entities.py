"""
Pydantic models for drawing entities in the DWG export JSON layout.

Field names are snake_case in Python and serialize to the PascalCase keys
used by the export format (``X``, ``Start``, ``Vertices``, ``IsClosed``...).
Use ``model_dump(by_alias=True)`` to get the export representation.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional


class ExportModel(BaseModel):
    """Base for all export models."""

    model_config = ConfigDict(populate_by_name=True)

    def to_export_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class Point3d(ExportModel):
    x: float = Field(..., alias="X")
    y: float = Field(..., alias="Y")
    z: float = Field(default=0.0, alias="Z")


class Point2d(ExportModel):
    x: float = Field(..., alias="X")
    y: float = Field(..., alias="Y")


class Entity(ExportModel):
    """Base for entities that can be placed in a drawing."""
    entity_type: str = Field(..., alias="EntityType")


class DBPoint(Entity):
    entity_type: Literal["POINT"] = Field(default="POINT", alias="EntityType")
    position: Point3d = Field(..., alias="Position")


class LwPolylineVertex(ExportModel):
    x: float = Field(..., alias="X")
    y: float = Field(..., alias="Y")
    bulge: float = Field(default=0.0, alias="Bulge")
    start_width: float = Field(default=0.0, alias="StartWidth")
    end_width: float = Field(default=0.0, alias="EndWidth")


class LwPolyline(Entity):
    """Lightweight (2D) polyline."""
    entity_type: Literal["LWPOLYLINE"] = Field(default="LWPOLYLINE", alias="EntityType")
    vertices: List[LwPolylineVertex] = Field(default_factory=list, alias="Vertices")
    is_closed: bool = Field(default=False, alias="IsClosed")
    elevation: float = Field(default=0.0, alias="Elevation")

    @property
    def number_of_vertices(self) -> int:
        return len(self.vertices)

    def add_vertex_at(self, index: int, point: Point2d, bulge: float = 0.0,
                      start_width: float = 0.0, end_width: float = 0.0) -> None:
        self.vertices.insert(index, LwPolylineVertex(
            x=point.x, y=point.y, bulge=bulge,
            start_width=start_width, end_width=end_width
        ))

    def get_point2d_at(self, index: int) -> Point2d:
        vertex = self.vertices[index]
        return Point2d(x=vertex.x, y=vertex.y)


class Polyline3d(Entity):
    """Heavyweight 3D polyline."""
    entity_type: Literal["POLYLINE3D"] = Field(default="POLYLINE3D", alias="EntityType")
    poly_type: Literal["SimplePoly"] = Field(default="SimplePoly", alias="PolyType")
    vertices: List[Point3d] = Field(default_factory=list, alias="Vertices")
    is_closed: bool = Field(default=False, alias="IsClosed")


class Polyline2d(Entity):
    """Old style 2D polyline."""
    entity_type: Literal["POLYLINE2D"] = Field(default="POLYLINE2D", alias="EntityType")
    poly_type: Literal["SimplePoly"] = Field(default="SimplePoly", alias="PolyType")
    vertices: List[Point3d] = Field(default_factory=list, alias="Vertices")
    is_closed: bool = Field(default=False, alias="IsClosed")
    elevation: float = Field(default=0.0, alias="Elevation")
    default_start_width: float = Field(default=0.0, alias="DefaultStartWidth")
    default_end_width: float = Field(default=0.0, alias="DefaultEndWidth")
    bulges: Optional[List[float]] = Field(default=None, alias="Bulges")


class Line(Entity):
    entity_type: Literal["LINE"] = Field(default="LINE", alias="EntityType")
    start: Point3d = Field(..., alias="Start")
    end: Point3d = Field(..., alias="End")

    @property
    def length(self) -> float:
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        dz = self.end.z - self.start.z
        return (dx**2 + dy**2 + dz**2)**0.5


POLYLINE_TYPES = (LwPolyline, Polyline2d, Polyline3d)
