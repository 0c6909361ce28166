"""
Tests for Flood Fill Node with Mask Generation.

Tests cover:
- Node configuration round-trip
- Node execution with and without mask output
- Node dictionary helper
- Error handling
"""

import unittest

from PIL import Image

from PB_Libs.FillLib.pixel import Pixel
from PB_Libs.NodesLib.flood_fill_node import (
    FloodFillNodeConfig,
    create_flood_fill_node,
    execute_flood_fill_node,
)


class TestFloodFillNodeConfig(unittest.TestCase):
    """Test FloodFillNodeConfig."""

    def test_defaults(self):
        config = FloodFillNodeConfig()
        self.assertEqual(config.get_seed(), (0, 0))
        self.assertEqual(config.get_fill_pixel(), Pixel(0, 0, 0, 255))
        self.assertEqual(config.tolerance, 0)
        self.assertFalse(config.antialias)

    def test_round_trip_dict(self):
        config = FloodFillNodeConfig(seed_x=3, seed_y=4, fill_color_r=10, tolerance=25, antialias=True)
        restored = FloodFillNodeConfig.from_dict(config.to_dict())
        self.assertEqual(restored, config)

    def test_from_dict_ignores_unknown_keys(self):
        config = FloodFillNodeConfig.from_dict({"id": "n1", "type": "Flood Fill", "seed_x": 2})
        self.assertEqual(config.seed_x, 2)

    def test_fill_pixel_is_clamped(self):
        config = FloodFillNodeConfig(fill_color_r=300, fill_color_g=-5)
        self.assertEqual(config.get_fill_pixel(), Pixel(255, 0, 0, 255))


class TestExecuteFloodFillNode(unittest.TestCase):
    """Test node execution."""

    def setUp(self):
        """Create a black image with a white vertical wall at x == 5."""
        self.image = Image.new("RGBA", (10, 6), color=(0, 0, 0, 255))
        pixels = self.image.load()
        for y in range(6):
            pixels[5, y] = (255, 255, 255, 255)

    def test_fills_left_of_wall(self):
        node = create_flood_fill_node("fill_1", (1, 1), (0, 0, 255, 255))

        result = execute_flood_fill_node(node, [self.image])

        self.assertEqual(result.size, (10, 6))
        self.assertEqual(result.getpixel((0, 0)), (0, 0, 255, 255))
        self.assertEqual(result.getpixel((4, 5)), (0, 0, 255, 255))
        self.assertEqual(result.getpixel((5, 0)), (255, 255, 255, 255))
        self.assertEqual(result.getpixel((6, 0)), (0, 0, 0, 255))
        # Input image is untouched
        self.assertEqual(self.image.getpixel((0, 0)), (0, 0, 0, 255))

    def test_returns_mask_when_requested(self):
        node = create_flood_fill_node("fill_1", (8, 2), (0, 255, 0, 255), output_mask=True)

        result = execute_flood_fill_node(node, [self.image])

        self.assertIsInstance(result, tuple)
        filled, mask = result
        self.assertEqual(filled.getpixel((9, 5)), (0, 255, 0, 255))
        self.assertEqual(mask.getpixel((9, 5)), (255, 255, 255, 255))
        self.assertEqual(mask.getpixel((5, 0)), (0, 0, 0, 255))
        self.assertEqual(mask.getpixel((0, 0)), (0, 0, 0, 255))

    def test_tolerance_is_applied(self):
        pixels = self.image.load()
        pixels[2, 2] = (10, 0, 0, 255)

        strict = execute_flood_fill_node(
            create_flood_fill_node("a", (0, 0), (0, 0, 255, 255), tolerance=0), [self.image]
        )
        loose = execute_flood_fill_node(
            create_flood_fill_node("b", (0, 0), (0, 0, 255, 255), tolerance=10), [self.image]
        )

        self.assertEqual(strict.getpixel((2, 2)), (10, 0, 0, 255))
        self.assertEqual(loose.getpixel((2, 2)), (0, 0, 255, 255))

    def test_empty_inputs_raise_value_error(self):
        with self.assertRaises(ValueError):
            execute_flood_fill_node(create_flood_fill_node("a", (0, 0), (0, 0, 0, 255)), [])

    def test_non_image_input_raises_type_error(self):
        with self.assertRaises(TypeError):
            execute_flood_fill_node(create_flood_fill_node("a", (0, 0), (0, 0, 0, 255)), ["image"])

    def test_seed_outside_image_raises_index_error(self):
        with self.assertRaises(IndexError):
            execute_flood_fill_node(create_flood_fill_node("a", (10, 0), (0, 0, 0, 255)), [self.image])


class TestCreateFloodFillNode(unittest.TestCase):
    """Test create_flood_fill_node helper."""

    def test_builds_node_dict(self):
        node = create_flood_fill_node("n", (3, 4), (1, 2, 3, 4), tolerance=7, antialias=True)

        self.assertEqual(node["id"], "n")
        self.assertEqual(node["type"], "Flood Fill")
        self.assertEqual(node["output_ports"], ["image"])
        self.assertEqual((node["seed_x"], node["seed_y"]), (3, 4))
        self.assertEqual(
            (node["fill_color_r"], node["fill_color_g"], node["fill_color_b"], node["fill_color_a"]),
            (1, 2, 3, 4),
        )
        self.assertEqual(node["tolerance"], 7)
        self.assertTrue(node["antialias"])

    def test_mask_port_listed(self):
        node = create_flood_fill_node("n", (0, 0), (0, 0, 0, 255), output_mask=True)
        self.assertEqual(node["output_ports"], ["image", "mask"])


if __name__ == "__main__":
    unittest.main()
