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
Shadow Demo - Point Light Among Crates

A point light with a 300 unit range sits just above a small crate. The crate
casts a shadow straight down, while a wall and a pillar further away cut
their own shadows into the lit area.

Setup:
- Light at (320, 240), intensity (radius) 300
- Crate (300..340, 200..220) just below the light
- Wall from (80, 400) to (200, 420), a two-vertex resistor
- Pillar, a hexagon around (480, 300)
- A far away crate at (900, 900) that the light never reaches

Expected behavior:
- A sharp edged shadow cone below the crate
- Shadows behind the wall and the pillar
- The far crate is filtered out before the sweep

Outputs output.svg and light.json next to this script.
"""

import sys
import os
import json
import math

# Add parent directories to path to import light2d_shapely modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from light2d_shapely.core.scene import Scene
from light2d_shapely.core.scene_objs import LightResistor, LightSource
from light2d_shapely.core.light_algorithm import SweepLightAlgorithm
from light2d_shapely.core.segments import determine_near_resistors
from light2d_shapely.core.svg_renderer import SVGRenderer


def hexagon(cx, cy, r):
    return [(cx + r * math.cos(math.radians(60 * k)), cy + r * math.sin(math.radians(60 * k)))
            for k in range(6)]


def main():
    """Run the shadow demonstration."""

    print("Shadow Demo - Point Light Among Crates")
    print("=" * 60)

    scene = Scene()
    scene.set_sample_resolution(64)

    crate = LightResistor([(340, 220), (340, 200), (300, 200), (300, 220)])
    crate.name = 'Crate'
    wall = LightResistor([(80, 400), (200, 420)])
    wall.name = 'Wall'
    pillar = LightResistor(hexagon(480, 300, 25))
    pillar.name = 'Pillar'
    far_crate = LightResistor([(900, 900), (940, 900), (940, 940), (900, 940)])
    far_crate.name = 'Far crate'

    for resistor in (crate, wall, pillar, far_crate):
        scene.add_occluder(resistor)

    light = LightSource(320, 240, 300)

    print(f"\nScene setup:")
    print(f"  Light: position=({light.x}, {light.y}), intensity={light.intensity}")
    for resistor in scene.resistors:
        print(f"  {resistor.name}: {len(resistor)} vertices")
    print(f"  Fill rays: {scene.parts_num}")

    near = determine_near_resistors(scene.resistors, light)
    print(f"  Resistors in range: {', '.join(r.name for r in near)}")

    print("\nComputing visibility polygon...")
    algorithm = SweepLightAlgorithm(scene, verbose=1)
    polygon = algorithm.create_rays(light)

    print(f"  Vertices: {len(polygon)}")
    print(f"  Lit area: {polygon.area:.1f} (full disc {math.pi * light.intensity ** 2:.1f})")

    if scene.warning:
        print(f"  Warning: {scene.warning}")
    if scene.error:
        print(f"  Error: {scene.error}")

    print("\nCreating SVG visualization...")
    renderer = SVGRenderer(width=800, height=800, viewbox=(0, -80, 640, 640))
    renderer.draw_scene(scene, polygons=[polygon], show_vertices=True)
    renderer.draw_point(light.position, color='orange', radius=4, label='Light')

    output_dir = os.path.dirname(__file__)

    svg_file = os.path.join(output_dir, 'output.svg')
    renderer.save(svg_file)
    print(f"\nSVG saved to: {svg_file}")

    json_file = os.path.join(output_dir, 'light.json')
    light_data = {
        'light': {'x': light.x, 'y': light.y, 'intensity': light.intensity},
        'resistors': [
            {'name': r.name, 'vertices': [v.to_dict() for v in r.vertices]}
            for r in scene.resistors
        ],
        'polygon': [{'x': x, 'y': y} for x, y in polygon.to_list()],
        'warning': scene.warning,
        'error': scene.error
    }
    with open(json_file, 'w') as f:
        json.dump(light_data, f, indent=2)
    print(f"JSON data exported to: {json_file}")

    print("\nDone.")


if __name__ == "__main__":
    main()
