"""
Drawing builder for committing converted entities into a DWG export JSON
document. Groups entities by layer in the ``Lines`` / ``Polylines`` /
``Blocks`` / ``Points`` arrays of the export layout.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import structlog

from .models.entities import POLYLINE_TYPES, DBPoint, Entity, Line

logger = structlog.get_logger()

ENTITY_ARRAYS = ('Lines', 'Polylines', 'Blocks', 'Points')


class DrawingBuilder:
    """Collects entities per layer and builds the drawing document."""

    def __init__(self, file_name: str = "untitled.dwg", default_layer: str = "0"):
        self.file_name = file_name
        self.default_layer = default_layer
        self._layers: Dict[str, Dict[str, List[Dict[str, Any]]]] = {}

    @classmethod
    def from_settings(cls, settings) -> "DrawingBuilder":
        return cls(
            file_name=settings.drawing_file_name,
            default_layer=settings.default_layer
        )

    def add_entity(self, entity: Entity, layer_name: Optional[str] = None) -> None:
        """Commit a single entity to ``layer_name`` (the default layer if omitted)."""
        if layer_name is None:
            layer_name = self.default_layer
        array_name = self._array_for(entity)
        layer = self._layers.setdefault(layer_name, {name: [] for name in ENTITY_ARRAYS})
        layer[array_name].append(entity.to_export_dict())

    def add_entities(self, entities: Iterable[Entity], layer_name: Optional[str] = None) -> int:
        """Commit several entities to one layer and return how many were added."""
        count = 0
        for entity in entities:
            self.add_entity(entity, layer_name)
            count += 1
        return count

    @property
    def layer_names(self) -> List[str]:
        return list(self._layers)

    @property
    def entity_count(self) -> int:
        return sum(
            len(layer[name])
            for layer in self._layers.values()
            for name in ENTITY_ARRAYS
        )

    def build(self) -> Dict[str, Any]:
        """Return the drawing as a DWG export JSON compatible dict."""
        layers = []
        for layer_name, arrays in self._layers.items():
            layer = {'LayerName': layer_name}
            for name in ENTITY_ARRAYS:
                layer[name] = list(arrays[name])
            layers.append(layer)

        return {
            'FileName': self.file_name,
            'Layers': layers
        }

    def save(self, path: Union[str, Path]) -> Path:
        """Write the drawing JSON to ``path`` (UTF-8, non-ASCII names kept)."""
        path = Path(path)
        drawing = self.build()
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(drawing, f, ensure_ascii=False, indent=2)

        logger.info(
            "Drawing saved",
            file_path=str(path),
            total_layers=len(drawing['Layers']),
            total_entities=self.entity_count
        )
        return path

    def _array_for(self, entity: Entity) -> str:
        if isinstance(entity, Line):
            return 'Lines'
        if isinstance(entity, POLYLINE_TYPES):
            return 'Polylines'
        if isinstance(entity, DBPoint):
            return 'Points'
        raise TypeError(f"Cannot add {type(entity).__name__} to a drawing")
