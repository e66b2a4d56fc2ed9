#geometry.py

import math
import logger as log

class Point:
    """A 2D point."""
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __repr__(self):
        return f"Point({self.x!r}, {self.y!r})"

    @staticmethod
    def distance_between_squared(p1, p2):
        """Square of the distance between two points. Integer points give an integer."""
        dx = p1.x - p2.x
        dy = p1.y - p2.y
        return dx * dx + dy * dy

    @staticmethod
    def distance_between(p1, p2):
        return math.sqrt(Point.distance_between_squared(p1, p2))

class AABB:
    """An axis-aligned box anchored at its origin (lowest x and y corner)."""
    def __init__(self, origin, width, height):
        self.origin = origin
        self.width = width
        self.height = height

    @classmethod
    def create(cls, origin, width, height):
        """Returns a new box, or None unless width and height are both positive."""
        if width > 0 and height > 0:
            return cls(origin, width, height)
        log.log(f"Rejected box at {origin!r}: width={width}, height={height} must be positive.")
        return None

    def contains(self, point):
        """Checks if a point is inside this box."""
        return (self.origin.x <= point.x < self.origin.x + self.width and
                self.origin.y <= point.y < self.origin.y + self.height)

    def intersects(self, other):
        """
        Checks if another box overlaps this one.

        Boxes are half-open like contains(), so boxes that only share an edge
        do not overlap.
        """
        return not (other.origin.x >= self.origin.x + self.width or
                    other.origin.x + other.width <= self.origin.x or
                    other.origin.y >= self.origin.y + self.height or
                    other.origin.y + other.height <= self.origin.y)

class Ellipse:
    kind = "ellipse"

    def __init__(self, center, x_radius, y_radius, angle=0.0):
        self.center = center
        self.x_radius = x_radius
        self.y_radius = y_radius
        # Angle in radians between the ellipse's local x-axis and the global x-axis.
        self.angle = angle

    @classmethod
    def create(cls, center, x_radius, y_radius, angle=0.0):
        """Returns a new ellipse, or None unless both radii are positive."""
        if x_radius > 0 and y_radius > 0:
            return cls(center, x_radius, y_radius, angle)
        log.log(f"Rejected ellipse at {center!r}: radii ({x_radius}, {y_radius}) must be positive.")
        return None

class Triangle:
    kind = "triangle"

    def __init__(self, p1, p2, p3):
        self.points = (p1, p2, p3)

    @classmethod
    def create(cls, p1, p2, p3, min_area):
        """Returns a new triangle, or None if its area is below min_area."""
        candidate = cls(p1, p2, p3)
        area = candidate.area()
        if area >= min_area:
            return candidate
        log.log(f"Rejected triangle {candidate.points!r}: area {area} is below {min_area}.")
        return None

    def area(self):
        """
        Area of the triangle by Heron's formula.

        Uses only the three edge lengths, so no height or angle is needed.
        """
        p1, p2, p3 = self.points
        a = Point.distance_between(p1, p2)
        b = Point.distance_between(p2, p3)
        c = Point.distance_between(p3, p1)

        # Semiperimeter.
        s = 0.5 * (a + b + c)
        # Rounding can push the product just below zero for collinear points.
        return math.sqrt(max(0.0, s * (s - a) * (s - b) * (s - c)))

# The shapes a higher-level caller can hold: a validated Ellipse or Triangle.
Shape = (Ellipse, Triangle)

def is_shape(value):
    return isinstance(value, Shape)
