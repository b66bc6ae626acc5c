"""
Tests for committing converted entities into a drawing document.
"""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from shapely.geometry import LineString, Point, Polygon

from dwgwriter.config import Settings
from dwgwriter.drawing import DrawingBuilder
from dwgwriter.geometry.segment import LineSegment
from dwgwriter.models.entities import Point2d
from dwgwriter.writer import DwgWriter


class TestDrawingBuilder(unittest.TestCase):

    def setUp(self):
        self.writer = DwgWriter()
        self.builder = DrawingBuilder(file_name="plan.dwg")

    def test_empty_drawing(self):
        self.assertEqual(self.builder.build(), {'FileName': 'plan.dwg', 'Layers': []})
        self.assertEqual(self.builder.entity_count, 0)

    def test_entities_are_grouped_by_kind(self):
        self.builder.add_entity(self.writer.to_line_entity(LineSegment((0, 0), (10, 0))), "WALLS")
        self.builder.add_entity(self.writer.to_heavy_polyline3d(LineString([(0, 0), (1, 1)])), "WALLS")
        self.builder.add_entity(self.writer.to_point_entity(Point(5, 5)), "WALLS")

        layer = self.builder.build()['Layers'][0]
        self.assertEqual(layer['LayerName'], "WALLS")
        self.assertEqual(len(layer['Lines']), 1)
        self.assertEqual(len(layer['Polylines']), 1)
        self.assertEqual(len(layer['Points']), 1)
        self.assertEqual(layer['Blocks'], [])

        line = layer['Lines'][0]
        self.assertEqual(line['Start'], {'X': 0.0, 'Y': 0.0, 'Z': 0.0})
        self.assertEqual(line['End'], {'X': 10.0, 'Y': 0.0, 'Z': 0.0})
        self.assertEqual(layer['Polylines'][0]['IsClosed'], False)
        self.assertEqual(layer['Points'][0]['Position'], {'X': 5.0, 'Y': 5.0, 'Z': 0.0})

    def test_layers_keep_insertion_order(self):
        polygon = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)], [[(1, 1), (2, 1), (2, 2)]])
        added = self.builder.add_entities(self.writer.to_lightweight_polyline_set(polygon), "ROOMS")
        self.builder.add_entity(self.writer.to_line_entity(LineString([(0, 0), (1, 0)])), "AXES")

        self.assertEqual(added, 2)
        self.assertEqual(self.builder.layer_names, ["ROOMS", "AXES"])
        self.assertEqual(self.builder.entity_count, 3)

        drawing = self.builder.build()
        self.assertEqual([l['LayerName'] for l in drawing['Layers']], ["ROOMS", "AXES"])
        self.assertEqual(len(drawing['Layers'][0]['Polylines']), 2)
        for layer in drawing['Layers']:
            for name in ('Lines', 'Polylines', 'Blocks'):
                self.assertIsInstance(layer[name], list)

    def test_entities_default_to_layer_zero(self):
        self.builder.add_entity(self.writer.to_point_entity(Point(0, 0)))
        self.assertEqual(self.builder.layer_names, ["0"])

    def test_default_layer_from_settings(self):
        settings = Settings(_env_file=None, default_layer="WALLS", drawing_file_name="site.dwg")
        builder = DrawingBuilder.from_settings(settings)
        self.assertEqual(builder.default_layer, "WALLS")

        builder.add_entity(self.writer.to_line_entity(LineSegment((0, 0), (1, 0))))
        builder.add_entities(self.writer.to_lightweight_polyline_set(Polygon([(0, 0), (1, 0), (1, 1)])))
        builder.add_entity(self.writer.to_point_entity(Point(5, 5)), "AXES")

        self.assertEqual(builder.layer_names, ["WALLS", "AXES"])
        layer = builder.build()["Layers"][0]
        self.assertEqual(len(layer["Lines"]), 1)
        self.assertEqual(len(layer["Polylines"]), 1)

    def test_non_entity_is_rejected(self):
        with self.assertRaises(TypeError):
            self.builder.add_entity(Point2d(x=0, y=0))

    def test_save_writes_utf8_json(self):
        self.builder.add_entity(self.writer.to_point_entity(Point(1, 2, 3)), "קירות")

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "drawing.json")
            with patch('dwgwriter.drawing.logger') as mock_logger:
                saved = self.builder.save(path)

            with open(saved, encoding='utf-8') as f:
                raw = f.read()
            mock_logger.info.assert_called_once()

        self.assertIn("קירות", raw)
        drawing = json.loads(raw)
        self.assertEqual(drawing['FileName'], "plan.dwg")
        self.assertEqual(drawing['Layers'][0]['Points'][0]['Position']['Z'], 3.0)


if __name__ == '__main__':
    unittest.main()
