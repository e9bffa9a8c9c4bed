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

from typing import Any, Dict, List, Protocol, Tuple, TYPE_CHECKING

import numpy as np

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from light2d_shapely.core.constants import ANGLE_EPSILON
    from light2d_shapely.core.errors import InvalidGeometryError
    from light2d_shapely.core.geometry import geometry, Point
    from light2d_shapely.core.scene_objs.light_source import LightSource
    from light2d_shapely.core.segments import build_segments, determine_near_resistors
    from light2d_shapely.core.sweep import ActiveEdgeSet, cast_rays, evaluate_candidates
    from light2d_shapely.core.viewport import ViewportPoint, build_viewport, find_start_actions
    from light2d_shapely.core.visibility_polygon import VisibilityPolygon
else:
    from .constants import ANGLE_EPSILON
    from .errors import InvalidGeometryError
    from .geometry import geometry, Point
    from .scene_objs.light_source import LightSource
    from .segments import build_segments, determine_near_resistors
    from .sweep import ActiveEdgeSet, cast_rays, evaluate_candidates
    from .viewport import ViewportPoint, build_viewport, find_start_actions
    from .visibility_polygon import VisibilityPolygon

if TYPE_CHECKING:
    from .scene import Scene


class LightingAlgorithm(Protocol):
    """
    Anything that turns a light into its visibility polygon.

    SweepLightAlgorithm is the reference implementation; other strategies
    (e.g. backed by a spatial index) only need this method.
    """

    def compute_visibility_polygon(self, light_position: Any, intensity: float) -> VisibilityPolygon:
        ...


class SweepLightAlgorithm:
    """
    Visibility polygon by an angular sweep over resistor edges.

    For each query the algorithm:
    1. Keeps the resistors whose bounding box can reach the light radius
    2. Flattens them into light-relative edges, slightly grown to close seams
    3. Sorts the edge endpoints by angle (the viewport) and finds the edges
       already open at -180 degrees
    4. Tests each corner (edge endpoint in reach, or point where an edge
       leaves the light circle) for visibility, and casts fill rays on a
       fixed angular grid plus rays just beside each corner; every ray ends
       at the nearest edge it meets
    5. Deduplicates, sorts by angle and moves the points back to world
       coordinates

    Nothing is cached between queries; the scene must not be mutated while a
    query runs.

    Attributes:
        scene (Scene): The scene holding the resistors and settings
        verbose (int): Verbosity level
        duplicate_count (int): Duplicate viewport points met by the last query
    """

    def __init__(self, scene: 'Scene', verbose: int = 0) -> None:
        """
        Initialize the algorithm.

        Args:
            scene (Scene): The scene to light
            verbose (int): Verbosity level (default: 0)
                0 = silent (no debug output)
                1 = verbose (show a summary of each query)
                2 = very verbose/debug (show every candidate ray)
        """
        self.scene: 'Scene' = scene
        self.verbose: int = verbose
        self.duplicate_count: int = 0

    def compute_visibility_polygon(self, light_position: Any, intensity: float) -> VisibilityPolygon:
        """
        Compute the lit area of a light.

        Args:
            light_position: Light position as a Point, (x, y) pair or
                {'x': ..., 'y': ...} dictionary.
            intensity: Light radius (finite, positive).

        Returns:
            VisibilityPolygon in world coordinates.

        Raises:
            ValueError: For invalid light parameters.
            InvalidGeometryError: If resistor geometry is inconsistent.
        """
        position = geometry.as_point(light_position)
        return self.create_rays(LightSource(position.x, position.y, intensity))

    def create_rays(self, source: LightSource) -> VisibilityPolygon:
        """
        Compute the lit area of a LightSource.

        See compute_visibility_polygon().
        """
        self.scene.error = None
        self.scene.warning = None
        self.duplicate_count = 0

        near_resistors = determine_near_resistors(self.scene.resistors, source)
        segments = build_segments(source, near_resistors)
        viewport = build_viewport(segments)

        try:
            open_actions = find_start_actions(segments, viewport, source.intensity)
        except InvalidGeometryError as e:
            self.scene.error = str(e)
            raise

        if self.verbose >= 1:
            print(f"[Light] {source}: {len(near_resistors)}/{len(self.scene.resistors)} resistors near, "
                  f"{len(segments)} edges, {len(open_actions)} open at -180")

        radius = source.intensity

        # Corners: edge endpoints within reach, and where edges leave the light circle
        corners = [vp for vp in viewport if vp.distance <= radius]
        for segment in segments:
            corners.extend(ViewportPoint(p.x, p.y) for p in segment.circle_crossings(radius))
        corner_visible, _ = evaluate_candidates(corners, viewport, open_actions)

        # Rays on the fixed grid, plus one on each side of every corner for a sharp
        # shadow edge. Each ray ends at the nearest open edge or at the radius.
        rays = self._fill_rays(radius)
        for corner in corners:
            rays.append(self._ray(corner.angle - ANGLE_EPSILON, radius))
            rays.append(self._ray(corner.angle + ANGLE_EPSILON, radius))
        ends, _ = cast_rays(rays, viewport, open_actions)

        lit: Dict[Tuple[float, float], Point] = {}
        for corner, is_lit in zip(corners, corner_visible):
            if is_lit:
                lit.setdefault((corner.x, corner.y), Point(corner.x, corner.y))
        for end in ends:
            lit.setdefault((end.x, end.y), Point(end.x, end.y))

        if self.verbose >= 2:
            for corner, is_lit in zip(corners, corner_visible):
                print(f"  corner {corner.angle:9.4f} deg ({corner.x:.4f}, {corner.y:.4f}) "
                      f"{'lit' if is_lit else 'shadow'}")
            for ray, end in zip(rays, ends):
                print(f"  ray    {ray.angle:9.4f} deg -> ({end.x:.4f}, {end.y:.4f}) "
                      f"{'open' if end is ray else 'blocked'}")

        # a full pass over the viewport meets every duplicate exactly once
        full_sweep = ActiveEdgeSet(open_actions)
        full_sweep.advance(viewport, 0, 180.0)
        self.duplicate_count = len(full_sweep.duplicates)

        if self.duplicate_count:
            self.scene.warning = (
                f"DuplicateTopologyWarning: {self.duplicate_count} viewport point(s) were already "
                f"active and were skipped (duplicate or self-adjacent resistor edges)"
            )
            if self.verbose >= 1:
                print(f"[Light] Warning: {self.scene.warning}")

        ordered = sorted(lit.values(), key=lambda p: geometry.vector_angle(p.x, p.y))
        vertices = [Point(p.x + source.x, p.y + source.y) for p in ordered]

        if self.verbose >= 1:
            print(f"[Light] visibility polygon has {len(vertices)} vertices")

        return VisibilityPolygon(vertices, source)

    def _fill_rays(self, radius: float) -> List[ViewportPoint]:
        """Full-radius rays at -180 + k * 360 / parts_num degrees."""
        parts_num = self.scene.parts_num
        angles = np.arange(parts_num) * (360.0 / parts_num) - 180.0
        radians = np.radians(angles)
        xs = radius * np.cos(radians)
        ys = radius * np.sin(radians)
        return [ViewportPoint(float(x), float(y)) for x, y in zip(xs, ys)]

    @staticmethod
    def _ray(angle: float, radius: float) -> ViewportPoint:
        end = geometry.radial_point(angle, radius)
        return ViewportPoint(end.x, end.y)
