"""
Tests for the core shape classes.

Covers hit-testing (boundary included), movement, bounding boxes and
the fill calls each shape issues on a rendering surface.
"""

import unittest
from figures.core.shapes import (
    Point, BoundingBox, Color, Triangle, Square, Circle,
    point_in_polygon, point_on_segment
)


class RecordingSurface:
    """Surface stand-in that records fill calls."""

    def __init__(self):
        self.calls = []

    def fill_polygon(self, points, color):
        self.calls.append(("polygon", [(p.x, p.y) for p in points], color))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("rect", (x, y, width, height), color))

    def fill_ellipse(self, x, y, width, height, color):
        self.calls.append(("ellipse", (x, y, width, height), color))


class TestColor(unittest.TestCase):
    """Test Color class."""

    def test_named_colors(self):
        self.assertEqual(Color.GREEN, Color(0, 255, 0))
        self.assertEqual(Color.GRAY, Color(128, 128, 128))

    def test_to_hex(self):
        self.assertEqual(Color.YELLOW.to_hex(), "#ffff00")
        self.assertEqual(Color(1, 2, 3).to_hex(), "#010203")

    def test_channel_out_of_range(self):
        with self.assertRaises(ValueError):
            Color(256, 0, 0)
        with self.assertRaises(ValueError):
            Color(0, -1, 0)


class TestGeometry(unittest.TestCase):
    """Test Point and BoundingBox."""

    def test_point_arithmetic(self):
        self.assertEqual(Point(3, 4) + Point(1, -1), Point(4, 3))
        self.assertEqual(Point(3, 4) - Point(1, -1), Point(2, 5))

    def test_bounding_box_extent(self):
        box = BoundingBox(10, 20, 30, 40)
        self.assertEqual((box.max_x, box.max_y), (40, 60))
        self.assertEqual(box.origin, Point(10, 20))


class TestPolygonHelpers(unittest.TestCase):
    """Test point_in_polygon and point_on_segment."""

    def setUp(self):
        self.square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]

    def test_point_in_polygon_inside(self):
        self.assertTrue(point_in_polygon(5, 5, self.square))

    def test_point_in_polygon_outside(self):
        self.assertFalse(point_in_polygon(15, 5, self.square))
        self.assertFalse(point_in_polygon(-1, -1, self.square))

    def test_point_on_segment(self):
        a, b = Point(0, 0), Point(10, 10)
        self.assertTrue(point_on_segment(5, 5, a, b))
        self.assertTrue(point_on_segment(0, 0, a, b))
        self.assertFalse(point_on_segment(11, 11, a, b))
        self.assertFalse(point_on_segment(5, 6, a, b))


class TestSquare(unittest.TestCase):
    """Test Square class."""

    def test_contains_inclusive_edges(self):
        square = Square(0, 0, 10, Color.YELLOW)
        self.assertTrue(square.contains(10, 10))
        self.assertTrue(square.contains(0, 0))
        self.assertTrue(square.contains(0, 10))
        self.assertFalse(square.contains(11, 11))
        self.assertFalse(square.contains(-1, 5))

    def test_bounding_box(self):
        square = Square(300, 50, 80, Color.YELLOW)
        self.assertEqual(square.get_bounding_box(), BoundingBox(300, 50, 80, 80))

    def test_draw(self):
        surface = RecordingSurface()
        Square(300, 50, 80, Color.YELLOW).draw(surface)
        self.assertEqual(surface.calls, [("rect", (300, 50, 80, 80), Color.YELLOW)])


class TestCircle(unittest.TestCase):
    """Test Circle class."""

    def test_contains(self):
        circle = Circle(450, 90, 40, Color.RED)
        self.assertTrue(circle.contains(450, 90))
        self.assertTrue(circle.contains(490, 90))  # on the boundary
        self.assertTrue(circle.contains(450, 50))
        self.assertFalse(circle.contains(491, 90))
        # Inside the bounding box corner but outside the circle
        self.assertFalse(circle.contains(412, 52))

    def test_bounding_box(self):
        circle = Circle(450, 90, 40, Color.RED)
        self.assertEqual(circle.get_bounding_box(), BoundingBox(410, 50, 80, 80))

    def test_draw(self):
        surface = RecordingSurface()
        Circle(450, 90, 40, Color.RED).draw(surface)
        self.assertEqual(surface.calls, [("ellipse", (410, 50, 80, 80), Color.RED)])


class TestTriangle(unittest.TestCase):
    """Test Triangle class."""

    def setUp(self):
        self.triangle = Triangle(150, 50, 80, Color.GREEN)

    def test_points(self):
        self.assertEqual(self.triangle.get_points(),
                         [Point(150, 50), Point(190, 130), Point(110, 130)])

    def test_odd_height_halves_down(self):
        triangle = Triangle(0, 0, 5, Color.GREEN)
        self.assertEqual(triangle.get_points(),
                         [Point(0, 0), Point(2, 5), Point(-2, 5)])
        self.assertEqual(triangle.get_bounding_box(), BoundingBox(-2, 0, 5, 5))

    def test_contains_interior(self):
        self.assertTrue(self.triangle.contains(150, 100))
        self.assertTrue(self.triangle.contains(170, 120))

    def test_contains_boundary(self):
        self.assertTrue(self.triangle.contains(150, 50))   # apex
        self.assertTrue(self.triangle.contains(150, 130))  # base midpoint
        self.assertTrue(self.triangle.contains(190, 130))  # base corner
        self.assertTrue(self.triangle.contains(170, 90))   # right edge

    def test_outside(self):
        # Inside the bounding box but beside the slanted edges
        self.assertFalse(self.triangle.contains(115, 55))
        self.assertFalse(self.triangle.contains(185, 55))
        self.assertFalse(self.triangle.contains(150, 131))
        self.assertFalse(self.triangle.contains(150, 49))

    def test_bounding_box(self):
        self.assertEqual(self.triangle.get_bounding_box(),
                         BoundingBox(110, 50, 80, 80))

    def test_draw(self):
        surface = RecordingSurface()
        self.triangle.draw(surface)
        self.assertEqual(surface.calls, [
            ("polygon", [(150, 50), (190, 130), (110, 130)], Color.GREEN)
        ])


class TestShapeCommon(unittest.TestCase):
    """Behaviour shared by all shape types."""

    def make_shapes(self):
        return [
            Triangle(150, 50, 80, Color.GREEN),
            Square(300, 50, 80, Color.YELLOW),
            Circle(450, 90, 40, Color.RED),
        ]

    def test_move_translates_bounding_box(self):
        for shape in self.make_shapes():
            before = shape.get_bounding_box()
            shape.move(7, -3)
            after = shape.get_bounding_box()
            self.assertEqual((after.x, after.y), (before.x + 7, before.y - 3))
            self.assertEqual((after.width, after.height),
                             (before.width, before.height))

    def test_hit_test_translation_equivariant(self):
        samples = [(x, y) for x in range(100, 500, 13) for y in range(40, 140, 7)]
        for shape in self.make_shapes():
            before = [shape.contains(x, y) for x, y in samples]
            shape.move(-37, 21)
            after = [shape.contains(x - 37, y + 21) for x, y in samples]
            self.assertEqual(before, after, shape.name)

    def test_color_is_fixed(self):
        shape = Square(0, 0, 10, Color.BLUE)
        shape.move(5, 5)
        self.assertEqual(shape.get_color(), Color.BLUE)
        self.assertEqual(shape.color, Color.BLUE)

    def test_default_name_and_unique_id(self):
        a = Circle(0, 0, 1, Color.RED)
        b = Circle(0, 0, 1, Color.RED)
        self.assertEqual(a.name, "Circle")
        self.assertNotEqual(a.id, b.id)
        self.assertEqual(Circle(0, 0, 1, Color.RED, name="Ball").name, "Ball")


if __name__ == '__main__':
    unittest.main()
