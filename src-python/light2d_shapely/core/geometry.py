"""
Copyright 2026 light2d-shapely authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from shapely.geometry import Point as ShapelyPoint, LineString, box as shapely_box

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from light2d_shapely.core.constants import PARALLEL_EPSILON
else:
    from .constants import PARALLEL_EPSILON


class Point:
    """
    A point in 2D space.
    Can be converted to/from Shapely Point objects.

    Two points are equal when their coordinates are equal, which is what the
    visibility polygon relies on to drop duplicate vertices.
    """
    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    @classmethod
    def from_shapely(cls, sp: ShapelyPoint) -> 'Point':
        """Create Point from Shapely Point."""
        return cls(sp.x, sp.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary representation."""
        return {'x': self.x, 'y': self.y}


@dataclass(frozen=True)
class Segment:
    """
    A line segment between (x1, y1) and (x2, y2).

    Segments are immutable values: operations such as resize() and translate()
    return new segments. Equality compares the four endpoint coordinates.
    """
    x1: float
    y1: float
    x2: float
    y2: float

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> 'Segment':
        return cls(p1.x, p1.y, p2.x, p2.y)

    @staticmethod
    def length_between(x1: float, y1: float, x2: float, y2: float) -> float:
        """Euclidean distance between (x1, y1) and (x2, y2)."""
        return math.hypot(x2 - x1, y2 - y1)

    @property
    def p1(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def p2(self) -> Point:
        return Point(self.x2, self.y2)

    def length(self) -> float:
        return Segment.length_between(self.x1, self.y1, self.x2, self.y2)

    def translate(self, dx: float, dy: float) -> 'Segment':
        return Segment(self.x1 + dx, self.y1 + dy, self.x2 + dx, self.y2 + dy)

    def resize(self, factor: float) -> 'Segment':
        """
        Grow the segment outward along its own direction.

        Both endpoints move away from each other by the same amount, so the
        resulting length is length * (1 + factor). A zero-length segment has no
        direction and is returned unchanged.

        Args:
            factor: Relative growth (0.01 adds 1% to the length).

        Returns:
            Resized segment
        """
        seg_length = self.length()
        if seg_length == 0:
            return self

        grow = seg_length * factor * 0.5
        ux = (self.x2 - self.x1) / seg_length
        uy = (self.y2 - self.y1) / seg_length
        return Segment(
            self.x1 - ux * grow, self.y1 - uy * grow,
            self.x2 + ux * grow, self.y2 + uy * grow
        )

    def intersection_parameter(self, other: 'Segment') -> Optional[float]:
        """
        Where this segment meets another, as a fraction of this segment.

        Solves p1 + t * r = q1 + u * s. Parallel and coincident segments are
        reported as not intersecting; otherwise both t and u must lie in [0, 1].

        Args:
            other: The segment to test against

        Returns:
            t in [0, 1] (0 at p1, 1 at p2), or None if the segments do not meet
        """
        rx = self.x2 - self.x1
        ry = self.y2 - self.y1
        sx = other.x2 - other.x1
        sy = other.y2 - other.y1

        denominator = rx * sy - ry * sx
        if abs(denominator) < PARALLEL_EPSILON:
            return None

        qpx = other.x1 - self.x1
        qpy = other.y1 - self.y1

        t = (qpx * sy - qpy * sx) / denominator
        u = (qpx * ry - qpy * rx) / denominator

        if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
            return t
        return None

    def intersects(self, other: 'Segment') -> bool:
        """Test whether two finite segments share a point (see intersection_parameter())."""
        return self.intersection_parameter(other) is not None

    def circle_crossings(self, radius: float) -> List[Point]:
        """
        Points where the segment crosses the circle of the given radius
        around the origin, ordered from p1 to p2.

        A tangent segment gives a single point; a zero-length segment none.
        """
        dx = self.x2 - self.x1
        dy = self.y2 - self.y1
        a = dx * dx + dy * dy
        if a == 0:
            return []

        b = 2.0 * (self.x1 * dx + self.y1 * dy)
        c = self.x1 * self.x1 + self.y1 * self.y1 - radius * radius
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0:
            return []

        root = math.sqrt(discriminant)
        crossings = []
        for t in sorted({(-b - root) / (2.0 * a), (-b + root) / (2.0 * a)}):
            if 0.0 <= t <= 1.0:
                crossings.append(Point(self.x1 + t * dx, self.y1 + t * dy))
        return crossings

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString([(self.x1, self.y1), (self.x2, self.y2)])

    @classmethod
    def from_shapely(cls, sl: LineString) -> 'Segment':
        """Create Segment from Shapely LineString."""
        coords = list(sl.coords)
        return cls(coords[0][0], coords[0][1], coords[1][0], coords[1][1])


class Box2:
    """
    Axis-aligned bounding box.

    Uses a Y-up frame: top is the maximum y and bottom the minimum y.
    The diagonal length is computed once and cached.
    """
    def __init__(self, left: float, top: float, right: float, bottom: float):
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom
        self._diagonal: Optional[float] = None

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def diagonal(self) -> float:
        if self._diagonal is None:
            self._diagonal = Segment.length_between(self.left, self.top, self.right, self.bottom)
        return self._diagonal

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """Corners in order top-left, top-right, bottom-right, bottom-left."""
        return (
            Point(self.left, self.top),
            Point(self.right, self.top),
            Point(self.right, self.bottom),
            Point(self.left, self.bottom),
        )

    def to_shapely(self):
        """Convert to a Shapely polygon (degenerates gracefully for flat boxes)."""
        return shapely_box(self.left, self.bottom, self.right, self.top)

    def __repr__(self) -> str:
        return f"Box2(left={self.left}, top={self.top}, right={self.right}, bottom={self.bottom})"


class Direction(Enum):
    """Turn direction between two angles."""
    NONE = 1
    LEFT = 2
    RIGHT = 3


class Geometry:
    """
    The geometry module, which provides the basic vector and angle operations
    used by the lighting algorithms.

    All angles are in degrees.
    """

    @staticmethod
    def point(x: float, y: float) -> Point:
        return Point(x, y)

    @staticmethod
    def segment(x1: float, y1: float, x2: float, y2: float) -> Segment:
        return Segment(x1, y1, x2, y2)

    @staticmethod
    def as_point(value: Any) -> Point:
        """
        Coerce a point-like value to a Point.

        Accepts Point instances, anything with x/y attributes (e.g. Shapely
        points), {'x': ..., 'y': ...} dictionaries and (x, y) sequences.

        Raises:
            ValueError: If the value cannot be read as a 2D point.
        """
        if isinstance(value, Point):
            return value
        if hasattr(value, 'x') and hasattr(value, 'y'):
            return Point(float(value.x), float(value.y))
        if isinstance(value, dict):
            try:
                return Point(float(value['x']), float(value['y']))
            except KeyError as exc:
                raise ValueError(f"Point dict needs 'x' and 'y' keys, got {value}") from exc
        try:
            x, y = value
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Cannot interpret {value!r} as a 2D point") from exc
        return Point(float(x), float(y))

    @staticmethod
    def distance(p1: Point, p2: Point) -> float:
        return math.hypot(p1.x - p2.x, p1.y - p2.y)

    @staticmethod
    def vector_angle(x: float, y: float) -> float:
        """
        Polar angle of the vector (x, y) in degrees.

        Args:
            x: The x-component of the vector.
            y: The y-component of the vector.

        Returns:
            Angle in the range (-180, 180]. A vector on the negative x axis
            (including y == -0.0) maps to 180.
        """
        angle = math.degrees(math.atan2(y, x))
        if angle <= -180.0:
            angle = 180.0
        return angle

    @staticmethod
    def get_angle_difference(from_angle: float, to_angle: float) -> float:
        """
        Signed shortest rotation from from_angle to to_angle.

        Wraps across the +/-180 boundary, e.g. from 170 to -170 is +20.
        The IEEE remainder keeps the result in [-180, 180] and makes the
        function exactly antisymmetric in its arguments.

        Args:
            from_angle: Start angle in degrees.
            to_angle: End angle in degrees.

        Returns:
            Signed difference in degrees
        """
        return math.remainder(to_angle - from_angle, 360.0)

    @staticmethod
    def get_direction(last_angle: float, current_angle: float) -> Direction:
        """
        Turn direction when moving from last_angle to current_angle.

        Returns:
            Direction.LEFT for a positive (counter-clockwise) difference,
            Direction.RIGHT for a negative one, Direction.NONE when equal.
        """
        difference = Geometry.get_angle_difference(last_angle, current_angle)
        if difference > 0:
            return Direction.LEFT
        if difference < 0:
            return Direction.RIGHT
        return Direction.NONE

    @staticmethod
    def radial_point(angle: float, radius: float) -> Point:
        """Point at the given angle (degrees) and distance from the origin."""
        rad = math.radians(angle)
        return Point(radius * math.cos(rad), radius * math.sin(rad))


# Create a singleton instance for convenience
geometry = Geometry()


# Example usage and testing
if __name__ == "__main__":
    square_edge = Segment(2, 2, 2, 6)
    print(f"Segment: {square_edge}, length: {square_edge.length()}")
    print(f"Resized by 1%: {square_edge.resize(0.01)}")

    crossing = Segment(0, 4, 4, 4)
    print(f"Intersects {crossing}: {square_edge.intersects(crossing)}")

    for a, b in [(0, 45), (45, 0), (170, -170), (-170, 170)]:
        print(f"Angle difference {a} -> {b}: {geometry.get_angle_difference(a, b)} "
              f"({geometry.get_direction(a, b).name})")

    print(f"Vector angle of (2, 6): {geometry.vector_angle(2, 6):.2f}")
