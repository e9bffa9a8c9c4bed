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

"""Exceptions raised by the lighting algorithms."""


class InvalidGeometryError(ValueError):
    """
    Resistor geometry is inconsistent with the viewport built from it.

    Raised when a boundary-crossing edge cannot be matched back to its
    viewport entry, e.g. because the resistors were mutated during a call.
    No partial polygon is produced.
    """
