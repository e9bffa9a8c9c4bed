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

from typing import Iterator, List, Optional, Sequence, Tuple

from shapely.geometry import Point as ShapelyPoint, Polygon

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from light2d_shapely.core.geometry import Point
    from light2d_shapely.core.scene_objs.light_source import LightSource
else:
    from .geometry import Point
    from .scene_objs.light_source import LightSource


class VisibilityPolygon:
    """
    The lit area of a light, as returned by the lighting algorithms.

    Vertices are in world coordinates, sorted by ascending angle around the
    light (from just above -180 degrees to 180). No winding direction is
    guaranteed beyond that.

    Attributes:
        vertices (list): Polygon vertices as Point objects.
        light (LightSource): The light the polygon was computed for.
    """

    def __init__(self, vertices: Sequence[Point], light: LightSource):
        self.vertices: List[Point] = list(vertices)
        self.light = light

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __getitem__(self, index: int) -> Point:
        return self.vertices[index]

    def to_list(self) -> List[Tuple[float, float]]:
        """Vertices as (x, y) tuples, e.g. for a renderer."""
        return [(p.x, p.y) for p in self.vertices]

    def to_shapely(self) -> Optional[Polygon]:
        """
        Convert to a Shapely Polygon.

        Returns:
            Polygon, or None when there are fewer than three vertices.
        """
        if len(self.vertices) < 3:
            return None
        return Polygon(self.to_list())

    def contains_point(self, x: float, y: float) -> bool:
        """Whether (x, y) lies inside or on the boundary of the lit area."""
        polygon = self.to_shapely()
        if polygon is None:
            return False
        return polygon.covers(ShapelyPoint(x, y))

    @property
    def area(self) -> float:
        polygon = self.to_shapely()
        return 0.0 if polygon is None else polygon.area

    def __repr__(self) -> str:
        return f"VisibilityPolygon(vertices={len(self.vertices)}, light={self.light})"
