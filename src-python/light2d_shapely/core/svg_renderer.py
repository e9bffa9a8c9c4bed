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

import svgwrite

# Handle both relative imports (when used as a module) and absolute imports (when run as script)
if __name__ == "__main__":
    from light2d_shapely.core.geometry import geometry
else:
    from .geometry import geometry


class SVGRenderer:
    """
    Debug renderer for lights, resistors and visibility polygons.

    Coordinate System:
        The renderer uses a Y-up coordinate system (positive Y points upward),
        which matches mathematical convention. This is achieved by applying
        a vertical flip transformation to the SVG coordinate system.

    Attributes:
        width (int): Canvas width in pixels
        height (int): Canvas height in pixels
        viewbox (tuple): SVG viewBox (min_x, min_y, width, height), Y-down
        dwg (svgwrite.Drawing): The SVG drawing object
        layer_light (svgwrite.Group): Group for visibility polygons
        layer_objects (svgwrite.Group): Group for resistors and lights
        layer_labels (svgwrite.Group): Group for label elements
    """

    def __init__(self, width=800, height=600, viewbox=None):
        """
        Initialize the SVG renderer.

        Args:
            width (int): Canvas width in pixels (default: 800)
            height (int): Canvas height in pixels (default: 600)
            viewbox (tuple or None): SVG viewBox as (min_x, min_y, width, height)
                                    in Y-up coordinates. If None, uses
                                    (0, 0, width, height)
        """
        self.width = width
        self.height = height
        self.user_viewbox = viewbox if viewbox is not None else (0, 0, width, height)

        # User specifies (min_x, min_y, width, height) in Y-up coordinates,
        # SVG needs min_y flipped to -(min_y + height)
        min_x, min_y, vb_width, vb_height = self.user_viewbox
        self.viewbox = (min_x, -(min_y + vb_height), vb_width, vb_height)

        self.dwg = svgwrite.Drawing(size=(f'{width}px', f'{height}px'),
                                    profile='full', debug=False)
        self.dwg.viewbox(*self.viewbox)

        self.dwg.add(self.dwg.rect(
            insert=(self.viewbox[0], self.viewbox[1]),
            size=(self.viewbox[2], self.viewbox[3]),
            fill='white'
        ))

        # Layers bottom to top, each flipped so positive Y points upward
        self.layer_light = self.dwg.add(self.dwg.g(id='layer-light', transform='scale(1, -1)'))
        self.layer_objects = self.dwg.add(self.dwg.g(id='layer-objects', transform='scale(1, -1)'))
        self.layer_labels = self.dwg.add(self.dwg.g(id='layer-labels', transform='scale(1, -1)'))

    def _normalize_coord(self, value):
        """
        Normalize a coordinate value: -0.0 and values below 1e-10 become 0.0.
        """
        if value == 0.0 or abs(value) < 1e-10:
            return 0.0
        return value

    def _normalize_point(self, point):
        """Any point-like value to a normalized (x, y) tuple."""
        p = geometry.as_point(point)
        return (self._normalize_coord(p.x), self._normalize_coord(p.y))

    def _add_label(self, text, x, y, color):
        self.layer_labels.add(self.dwg.text(
            text,
            insert=(x, -y),
            fill=color,
            font_size='8px',
            font_family='sans-serif',
            transform='scale(1, -1)'  # Flip text back to be readable
        ))

    def draw_point(self, point, color='black', radius=3, label=None):
        """
        Draw a point (circle).

        Args:
            point: Point, (x, y) pair or {'x': ..., 'y': ...} dict
            color (str): Fill color (default: 'black')
            radius (float): Circle radius in user units (default: 3)
            label (str or None): Optional text label to show near point
        """
        x, y = self._normalize_point(point)
        self.layer_objects.add(self.dwg.circle(center=(x, y), r=radius, fill=color))
        if label:
            self._add_label(label, x + radius + 2, y + radius + 2, color)

    def draw_line_segment(self, p1, p2, color='gray', stroke_width=2):
        """Draw a line segment between two point-like values."""
        self.layer_objects.add(self.dwg.line(
            start=self._normalize_point(p1),
            end=self._normalize_point(p2),
            stroke=color,
            stroke_width=stroke_width
        ))

    def draw_resistor(self, resistor, fill='dimgray', stroke='black', stroke_width=1, label=None):
        """
        Draw a light resistor.

        Closed polygons are filled; two-vertex resistors are drawn as a line
        and single-vertex ones as a point.

        Args:
            resistor (LightResistor): The resistor to draw
            label (str or None): Text near the first vertex; defaults to the
                resistor name
        """
        vertices = [self._normalize_point(v) for v in resistor.vertices]
        if not vertices:
            return

        if len(vertices) >= 3:
            element = self.dwg.polygon(points=vertices, fill=fill, stroke=stroke,
                                       stroke_width=stroke_width)
        elif len(vertices) == 2:
            element = self.dwg.line(start=vertices[0], end=vertices[1], stroke=stroke,
                                    stroke_width=stroke_width)
        else:
            element = self.dwg.circle(center=vertices[0], r=stroke_width * 2, fill=stroke)

        element['id'] = f'resistor-{resistor.uuid}'
        element['class'] = 'resistor'
        self.layer_objects.add(element)

        label = label if label is not None else resistor.name
        if label:
            self._add_label(label, vertices[0][0] + 2, vertices[0][1] + 2, stroke)

    def draw_light_source(self, source, color='orange', show_range=True):
        """
        Draw a light as a dot, with a dashed circle for its range.
        """
        center = self._normalize_point(source.position)
        if show_range:
            self.layer_objects.add(self.dwg.circle(
                center=center, r=source.intensity, fill='none', stroke=color,
                stroke_width=0.5, stroke_dasharray='4, 2'
            ))
        self.layer_objects.add(self.dwg.circle(center=center, r=3, fill=color))

    def draw_visibility_polygon(self, polygon, fill='yellow', fill_opacity=0.5,
                                stroke='goldenrod', stroke_width=0.5, show_vertices=False):
        """
        Draw the lit area returned by a lighting algorithm.

        Args:
            polygon (VisibilityPolygon): The polygon to draw
            show_vertices (bool): Also mark each vertex with a small dot
        """
        points = [self._normalize_point(p) for p in polygon]
        if len(points) >= 3:
            self.layer_light.add(self.dwg.polygon(
                points=points, fill=fill, fill_opacity=fill_opacity,
                stroke=stroke, stroke_width=stroke_width, class_='visibility-polygon'
            ))
        if show_vertices or len(points) < 3:
            for x, y in points:
                self.layer_light.add(self.dwg.circle(center=(x, y), r=1, fill=stroke))

    def draw_scene(self, scene, polygons=(), show_vertices=False):
        """
        Draw every resistor of a scene plus any number of visibility polygons
        and their lights.
        """
        for polygon in polygons:
            self.draw_visibility_polygon(polygon, show_vertices=show_vertices)
            self.draw_light_source(polygon.light)
        for resistor in scene.resistors:
            self.draw_resistor(resistor)

    def save(self, filename: str = None):
        """
        Save the SVG to a file.

        Args:
            filename (str): Output filename (e.g., 'output.svg')
        """
        if filename is None:
            filename = "output.svg"
        self.dwg.saveas(filename)

    def to_string(self):
        """
        Get the SVG as a string.

        Returns:
            str: SVG content as XML string
        """
        return self.dwg.tostring()
