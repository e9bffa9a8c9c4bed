"""
===============================================================================
SWEEP LIGHT ALGORITHM - End-to-End Verification Test
===============================================================================

Runs full visibility polygon queries through SweepLightAlgorithm:

1. A light with nothing around it is a regular parts_num-gon
2. A box in front of the light cuts a shadow notch with sharp edges
3. Shadows across the -180/180 seam and walls reaching past the radius
   (rays stop on the wall, and the polygon follows it up to the light circle)
4. A light enclosed by a resistor lights the room, not nothing
5. Degenerate input: light on an edge, duplicate resistors
6. Light parameters validation and scene.error / scene.warning reporting

USAGE
-----
    python -m light2d_shapely.developer_tests.test_light_algorithm

===============================================================================
"""

import sys
import os
import io
import math
import contextlib

from shapely.geometry import LineString

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

import light2d_shapely.core.light_algorithm as light_algorithm_module
from light2d_shapely.core.errors import InvalidGeometryError
from light2d_shapely.core.geometry import geometry, Point
from light2d_shapely.core.light_algorithm import SweepLightAlgorithm
from light2d_shapely.core.scene import Scene
from light2d_shapely.core.scene_objs import LightResistor


def box_scene():
    """Box x in [10, 20], y in [-5, 5] to the right of the origin."""
    scene = Scene()
    scene.add_occluder(LightResistor([(10, -5), (20, -5), (20, 5), (10, 5)]))
    return scene


def polar(polygon):
    """(angle, distance) of each vertex as seen from the light."""
    light = polygon.light
    return [(geometry.vector_angle(p.x - light.x, p.y - light.y),
             math.hypot(p.x - light.x, p.y - light.y)) for p in polygon]


def test_unobstructed_light():
    print("\nTest: light without resistors")
    scene = Scene()
    polygon = SweepLightAlgorithm(scene).compute_visibility_polygon((0, 0), 100)

    assert len(polygon) == 32
    vertices = polar(polygon)
    for angle, distance in vertices:
        assert abs(distance - 100) < 1e-9
    angles = [angle for angle, _ in vertices]
    assert angles == sorted(angles)
    steps = [b - a for a, b in zip(angles, angles[1:])]
    assert all(abs(step - 11.25) < 1e-6 for step in steps), steps

    scene.set_sample_resolution(8)
    polygon = SweepLightAlgorithm(scene).compute_visibility_polygon((0, 0), 100)
    assert len(polygon) == 8
    octagon = 0.5 * 8 * math.sin(math.radians(45)) * 100 ** 2
    assert abs(polygon.area - octagon) < 1e-6
    print("  PASS")


def test_far_resistor_changes_nothing():
    print("\nTest: resistor out of range")
    empty = SweepLightAlgorithm(Scene()).compute_visibility_polygon((0, 0), 100)

    scene = Scene()
    scene.add_occluder(LightResistor([(500, 500), (510, 500), (510, 510)]))
    far = SweepLightAlgorithm(scene).compute_visibility_polygon((0, 0), 100)
    assert far.to_list() == empty.to_list()
    print("  PASS")


def test_shadow_notch():
    print("\nTest: box shadow notch")
    polygon = SweepLightAlgorithm(box_scene()).compute_visibility_polygon((0, 0), 100)

    assert not polygon.contains_point(50, 0), "behind the box"
    assert not polygon.contains_point(15, 0), "inside the box"
    for x, y in [(0, 50), (-50, 0), (0, -50), (5, 0), (50, 40)]:
        assert polygon.contains_point(x, y), f"({x}, {y}) should be lit"

    vertices = polar(polygon)
    # the front face of the box is the only thing seen straight ahead
    near_axis = [distance for angle, distance in vertices if abs(angle) < 26.75]
    assert near_axis, "front corners should be polygon vertices"
    assert all(distance < 12 for distance in near_axis)
    # the shadow edges are sharp: full radius right beside the corners
    for sign in (1, -1):
        edge = [d for a, d in vertices if 26.7 < sign * a < 27]
        assert any(d > 99.9 for d in edge), f"no full-radius ray beside the corner ({sign})"

    assert 0.5 * math.pi * 100 ** 2 < polygon.area < math.pi * 100 ** 2
    print("  PASS")


def test_idempotent():
    print("\nTest: repeated queries give the same polygon")
    algorithm = SweepLightAlgorithm(box_scene())
    first = algorithm.compute_visibility_polygon((3, -2), 80)
    second = algorithm.compute_visibility_polygon((3, -2), 80)
    assert first.to_list() == second.to_list()
    print("  PASS")


def test_world_coordinates_and_radius():
    print("\nTest: output in world coordinates, within the radius")
    scene = Scene()
    scene.add_occluder(LightResistor([(340, 220), (340, 200), (300, 200), (300, 220)]))
    polygon = SweepLightAlgorithm(scene).compute_visibility_polygon((320, 240), 300)

    assert len(polygon) >= 3
    for angle, distance in polar(polygon):
        assert distance <= 300 + 1e-9
    assert polygon.contains_point(320, 260), "above the light"
    assert not polygon.contains_point(320, 100), "below the resistor"
    print("  PASS")


def test_shadow_across_sweep_start():
    """A triangle straddling the negative x axis of the light."""
    print("\nTest: shadow across -180/180")
    scene = Scene()
    scene.add_occluder(LightResistor([(-30, 10), (-20, -15), (-40, -5)]))
    polygon = SweepLightAlgorithm(scene).compute_visibility_polygon((0, 0), 100)

    assert not polygon.contains_point(-60, 0)
    assert not polygon.contains_point(-90, 5)
    assert polygon.contains_point(-10, 0)
    assert polygon.contains_point(0, 60)
    assert polygon.contains_point(60, 0)
    print("  PASS")


def test_wall_beyond_radius():
    """The wall runs far past the light radius at both ends."""
    print("\nTest: wall longer than the light radius")
    scene = Scene()
    scene.add_occluder(LightResistor([(50, -500), (50, 500)]))
    polygon = SweepLightAlgorithm(scene).compute_visibility_polygon((0, 0), 100)

    for angle, distance in polar(polygon):
        assert distance <= 100 + 1e-9
    assert polygon.contains_point(30, 0)
    assert polygon.contains_point(45, 0), "just in front of the wall"
    assert polygon.contains_point(45, 60), "in front of the wall, off axis"
    assert not polygon.contains_point(80, 0)
    assert polygon.contains_point(-80, 0)

    # the lit area meets the light circle where the wall crosses it
    rim = math.sqrt(100 ** 2 - 50 ** 2)
    for y in (rim, -rim):
        assert any(math.hypot(p.x - 50, p.y - y) < 0.5 for p in polygon), \
            f"no vertex near (50, {y:.2f})"
    print("  PASS")


def test_wall_across_sweep_start_beyond_radius():
    """The wall crosses the negative x axis outside the light circle."""
    print("\nTest: wall crossing -180/180 beyond the radius")
    wall = [(-200, 50), (0, -60)]
    scene = Scene()
    scene.add_occluder(LightResistor(wall))
    polygon = SweepLightAlgorithm(scene).compute_visibility_polygon((0, 0), 100)

    wall_line = LineString(wall)
    for p in polygon:
        assert math.hypot(p.x, p.y) <= 100 + 1e-9
        sight = LineString([(0, 0), (0.999 * p.x, 0.999 * p.y)])
        assert not sight.intersects(wall_line), f"vertex ({p.x:.2f}, {p.y:.2f}) seen through the wall"
    assert not polygon.contains_point(-43.3, -78.9), "behind the wall"
    assert polygon.contains_point(-20, -30), "in front of the wall"
    assert polygon.contains_point(-90, 10)
    assert polygon.contains_point(0, 90)
    print("  PASS")


def room_scene():
    """Closed square room from (-50, -50) to (50, 50) around the origin."""
    scene = Scene()
    scene.add_occluder(LightResistor([(-50, -50), (50, -50), (50, 50), (-50, 50)]))
    return scene


def test_light_inside_room():
    print("\nTest: light enclosed by a resistor")
    polygon = SweepLightAlgorithm(room_scene()).compute_visibility_polygon((0, 0), 100)

    assert len(polygon) >= 4
    assert 9950 < polygon.area <= 10000 + 1e-6, polygon.area
    for x, y in [(45, 45), (0, 45), (45, 30), (-45, -45), (-49, 0)]:
        assert polygon.contains_point(x, y), f"({x}, {y}) should be lit"
    assert not polygon.contains_point(60, 0), "outside the room"
    for angle, distance in polar(polygon):
        assert distance < 71, "rays stop on the room walls"
    print("  PASS")


def test_box_inside_room():
    print("\nTest: box shadow inside a room")
    scene = room_scene()
    scene.add_occluder(LightResistor([(10, -5), (20, -5), (20, 5), (10, 5)]))
    polygon = SweepLightAlgorithm(scene).compute_visibility_polygon((0, 0), 100)

    assert len(polygon) > 4
    for x, y in [(45, 30), (0, 45), (-45, 0), (5, 0)]:
        assert polygon.contains_point(x, y), f"({x}, {y}) should be lit"
    assert not polygon.contains_point(45, 0), "behind the box"
    assert not polygon.contains_point(15, 0), "inside the box"
    print("  PASS")


def test_light_on_edge():
    print("\nTest: light sitting on a resistor edge")
    scene = Scene()
    scene.add_occluder(LightResistor([(0, -5), (10, -5), (10, 5), (0, 5)]))
    polygon = SweepLightAlgorithm(scene).compute_visibility_polygon((0, 0), 100)

    assert len(polygon) >= 3
    assert polygon.contains_point(-50, 0)
    assert not polygon.contains_point(50, 0)
    assert scene.error is None
    print("  PASS")


def test_duplicate_resistors_warn():
    print("\nTest: duplicate resistors reported")
    scene = box_scene()
    algorithm = SweepLightAlgorithm(scene)
    algorithm.compute_visibility_polygon((0, 0), 100)
    assert scene.warning is None
    assert algorithm.duplicate_count == 0

    scene.add_occluder(LightResistor([(10, -5), (20, -5), (20, 5), (10, 5)]))
    polygon = algorithm.compute_visibility_polygon((0, 0), 100)
    assert algorithm.duplicate_count > 0
    assert scene.warning.startswith("DuplicateTopologyWarning")
    # still a usable shadow
    assert not polygon.contains_point(50, 0)
    assert polygon.contains_point(-50, 0)
    print("  PASS")


def test_light_position_forms():
    print("\nTest: light position as tuple, Point or dict")
    algorithm = SweepLightAlgorithm(box_scene())
    expected = algorithm.compute_visibility_polygon((1, 2), 60).to_list()
    assert algorithm.compute_visibility_polygon(Point(1, 2), 60).to_list() == expected
    assert algorithm.compute_visibility_polygon({'x': 1, 'y': 2}, 60).to_list() == expected
    print("  PASS")


def test_invalid_light_parameters():
    print("\nTest: invalid light parameters")
    algorithm = SweepLightAlgorithm(box_scene())
    bad_calls = [
        ((0, 0), 0),
        ((0, 0), -10),
        ((0, 0), float('nan')),
        ((0, 0), float('inf')),
        ((float('nan'), 0), 10),
        ('light', 10),
    ]
    for position, intensity in bad_calls:
        try:
            algorithm.compute_visibility_polygon(position, intensity)
        except ValueError:
            continue
        raise AssertionError(f"({position!r}, {intensity!r}) should raise ValueError")
    print("  PASS")


def test_invalid_geometry_sets_scene_error():
    print("\nTest: InvalidGeometryError reported on the scene")
    scene = box_scene()
    algorithm = SweepLightAlgorithm(scene)

    def broken_start_actions(segments, viewport, intensity):
        raise InvalidGeometryError("edge without viewport entry")

    original = light_algorithm_module.find_start_actions
    light_algorithm_module.find_start_actions = broken_start_actions
    try:
        try:
            algorithm.compute_visibility_polygon((0, 0), 100)
        except InvalidGeometryError:
            pass
        else:
            raise AssertionError("InvalidGeometryError not raised")
    finally:
        light_algorithm_module.find_start_actions = original

    assert scene.error == "edge without viewport entry"
    # the next successful query clears it
    algorithm.compute_visibility_polygon((0, 0), 100)
    assert scene.error is None
    print("  PASS")


def test_verbose_output():
    print("\nTest: verbose output")
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        SweepLightAlgorithm(box_scene(), verbose=2).compute_visibility_polygon((0, 0), 100)
    output = buffer.getvalue()
    assert "[Light]" in output
    assert "shadow" in output and "lit" in output

    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        SweepLightAlgorithm(box_scene()).compute_visibility_polygon((0, 0), 100)
    assert buffer.getvalue() == ""
    print("  PASS")


def run_all_tests():
    tests = [
        ("unobstructed light", test_unobstructed_light),
        ("far resistor", test_far_resistor_changes_nothing),
        ("shadow notch", test_shadow_notch),
        ("idempotent", test_idempotent),
        ("world coordinates", test_world_coordinates_and_radius),
        ("shadow across -180/180", test_shadow_across_sweep_start),
        ("wall beyond radius", test_wall_beyond_radius),
        ("wall across -180/180 beyond radius", test_wall_across_sweep_start_beyond_radius),
        ("light inside room", test_light_inside_room),
        ("box inside room", test_box_inside_room),
        ("light on edge", test_light_on_edge),
        ("duplicate resistors", test_duplicate_resistors_warn),
        ("light position forms", test_light_position_forms),
        ("invalid light parameters", test_invalid_light_parameters),
        ("invalid geometry", test_invalid_geometry_sets_scene_error),
        ("verbose output", test_verbose_output),
    ]

    passed = 0
    errors = []

    for name, test_func in tests:
        try:
            test_func()
            passed += 1
        except Exception as e:
            errors.append((name, str(e)))
            print(f"\n  FAILED: {name}")
            print(f"    Error: {e}")

    print("\n" + "=" * 70)
    print(f"SUMMARY: {passed}/{len(tests)} tests passed")
    print("=" * 70)

    for name, error in errors:
        print(f"  - {name}: {error}")
    return not errors


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
