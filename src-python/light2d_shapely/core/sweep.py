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

"""
Active edge sweep over the viewport.

Walking the viewport in angle order, the first endpoint met of an edge opens
it and the second closes it. At any angle the open edges are the only ones
that can stand between the light and a point at that angle, so visibility is
decided by intersecting a sight line from the light with the open edges only,
and a ray cast from the light ends at the nearest of them.
"""

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from light2d_shapely.core.constants import SIGHT_SHRINK
    from light2d_shapely.core.geometry import Segment
    from light2d_shapely.core.viewport import ViewportPoint
else:
    from .constants import SIGHT_SHRINK
    from .geometry import Segment
    from .viewport import ViewportPoint


class ActiveEdgeSet:
    """
    The set of edges crossing the sweep ray.

    Edges are stored by the viewport point that opened them. Seeding with the
    start actions gives the state at -180 degrees; advance() then moves the
    sweep forward.

    Attributes:
        duplicates (list): Viewport points that were met while already in the
            set. This means the topology has duplicate or self-adjacent
            edges; the point is skipped and the sweep continues.
    """

    def __init__(self, open_actions: Iterable[ViewportPoint] = ()):
        self._active = set(open_actions)
        self.duplicates: List[ViewportPoint] = []

    def __len__(self) -> int:
        return len(self._active)

    def __contains__(self, vp: ViewportPoint) -> bool:
        return vp in self._active

    def __iter__(self) -> Iterator[ViewportPoint]:
        return iter(self._active)

    def toggle(self, vp: ViewportPoint) -> None:
        """Open or close the edge of vp."""
        if vp in self._active:
            self.duplicates.append(vp)
            return

        if vp.other in self._active:
            self._active.remove(vp.other)
            return

        self._active.add(vp)

    def advance(self, viewport: Sequence[ViewportPoint], position: int, angle: float) -> int:
        """
        Toggle viewport points from index position up to the given angle.

        Points whose angle equals the target are included.

        Returns:
            Index of the first viewport point past the angle.
        """
        while position < len(viewport) and viewport[position].angle <= angle:
            self.toggle(viewport[position])
            position += 1
        return position

    def occludes(self, x: float, y: float) -> bool:
        """
        Test whether any open edge stands between the light and (x, y).

        The sight line is trimmed by SIGHT_SHRINK at both ends: an edge ending on
        the point itself, or passing through the light, does not count.
        """
        sight = Segment(x * SIGHT_SHRINK, y * SIGHT_SHRINK,
                        x * (1.0 - SIGHT_SHRINK), y * (1.0 - SIGHT_SHRINK))
        for vp in self._active:
            if sight.intersects(vp.segment):
                return True
        return False

    def nearest_hit(self, x: float, y: float) -> float:
        """
        How far the ray from the light to (x, y) gets before an open edge
        stops it.

        Hits closer to the light than SIGHT_SHRINK are ignored, so an edge
        passing through the light does not swallow the ray.

        Returns:
            Fraction of the ray travelled, 1.0 when nothing is in the way.
        """
        ray = Segment(0.0, 0.0, x, y)
        nearest = 1.0
        for vp in self._active:
            t = ray.intersection_parameter(vp.segment)
            if t is not None and SIGHT_SHRINK <= t < nearest:
                nearest = t
        return nearest


def _in_angle_order(candidates: Sequence[ViewportPoint], viewport: Sequence[ViewportPoint],
                    actions: ActiveEdgeSet) -> Iterator[int]:
    """Yield candidate indices by ascending angle, with actions advanced to each angle."""
    position = 0
    for i in sorted(range(len(candidates)), key=lambda k: candidates[k].angle):
        position = actions.advance(viewport, position, candidates[i].angle)
        yield i


def is_visible(point: ViewportPoint, viewport: Sequence[ViewportPoint],
               open_actions: Iterable[ViewportPoint]) -> bool:
    """
    Check whether the light reaches a point.

    Copies the start actions, sweeps the viewport up to the point's angle
    and tests the sight line from the light to the point against the edges that
    are still open.

    Args:
        point: Candidate point (light-relative).
        viewport: Sorted viewport.
        open_actions: Start actions from find_start_actions().

    Returns:
        True if no open edge blocks the point.
    """
    actions = ActiveEdgeSet(open_actions)
    actions.advance(viewport, 0, point.angle)
    return not actions.occludes(point.x, point.y)


def evaluate_candidates(candidates: Sequence[ViewportPoint], viewport: Sequence[ViewportPoint],
                        open_actions: Iterable[ViewportPoint]) -> Tuple[List[bool], List[ViewportPoint]]:
    """
    Visibility of many candidates with a single sweep.

    Candidates are visited in angle order while one ActiveEdgeSet rolls
    forward through the viewport. The result for each candidate is the same
    as is_visible() would give.

    Args:
        candidates: Candidate points in any order.
        viewport: Sorted viewport.
        open_actions: Start actions from find_start_actions().

    Returns:
        (visible, duplicates): visibility flags in candidate order, and the
        duplicate viewport points met by the sweep.
    """
    visible = [False] * len(candidates)
    actions = ActiveEdgeSet(open_actions)
    for i in _in_angle_order(candidates, viewport, actions):
        visible[i] = not actions.occludes(candidates[i].x, candidates[i].y)
    return visible, actions.duplicates


def cast_rays(rays: Sequence[ViewportPoint], viewport: Sequence[ViewportPoint],
              open_actions: Iterable[ViewportPoint]) -> Tuple[List[ViewportPoint], List[ViewportPoint]]:
    """
    Where each ray from the light ends.

    A ray runs from the light to its point and stops at the nearest open
    edge. Rays are swept in angle order like evaluate_candidates().

    Args:
        rays: Ray ends (light-relative), usually at the light radius.
        viewport: Sorted viewport.
        open_actions: Start actions from find_start_actions().

    Returns:
        (ends, duplicates): in ray order, the ray's own point when nothing is
        hit, otherwise the hit point; and the duplicate viewport points met
        by the sweep.
    """
    ends: List[Optional[ViewportPoint]] = [None] * len(rays)
    actions = ActiveEdgeSet(open_actions)
    for i in _in_angle_order(rays, viewport, actions):
        ray = rays[i]
        t = actions.nearest_hit(ray.x, ray.y)
        ends[i] = ray if t >= 1.0 else ViewportPoint(ray.x * t, ray.y * t)
    return ends, actions.duplicates
