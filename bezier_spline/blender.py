# Copyright 2023-2025 Jens Zamanian

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

# https://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Storing splines as Blender curve objects.

A Spline maps onto a curve object with one BEZIER spline: anchors to co and
the handles to handle_left and handle_right. is_looping is use_cyclic_u and
the transform is the object's location, rotation_euler and scale.
Requires Blender's bpy and mathutils modules.
"""

import logging

import bpy
import mathutils

from .curve_point import CurvePoint
from .exceptions import EmptySplineError
from .geometry import Transform, Vector
from .spline import Spline

logger = logging.getLogger(__name__)

RESOLUTION_U = 64


def _mu(v: Vector) -> mathutils.Vector:
    return mathutils.Vector((v.x, v.y, v.z))


def spline_to_blender(spline: Spline,
                      name: str = "Spline",
                      transform: Transform | None = None,
                      collection: str = "Collection"):
    """Creates a new curve object in Blender from spline. Returns the object."""
    if not spline.total_points:
        raise EmptySplineError("store in Blender")
    transform = transform or Transform()
    cu = bpy.data.curves.new(name, 'CURVE')
    ob = bpy.data.objects.new(name, cu)
    ob.location = _mu(transform.location)
    ob.rotation_euler = tuple(transform.rotation)
    ob.scale = _mu(transform.scale)
    bpy.data.collections[collection].objects.link(ob)
    cu.resolution_u = RESOLUTION_U

    bl_spline = cu.splines.new('BEZIER')
    bl_spline.use_cyclic_u = spline.is_looping
    bezier_points = bl_spline.bezier_points
    # A new spline has one point already.
    bezier_points.add(spline.total_points - 1)
    for bp, point in zip(bezier_points, spline):
        bp.handle_left_type = 'FREE'
        bp.handle_right_type = 'FREE'
        bp.co = _mu(point.anchor)
        bp.handle_left = _mu(point.left_control)
        bp.handle_right = _mu(point.right_control)

    logger.debug("Wrote spline with %d points to Blender object %s", spline.total_points, ob.name)
    return ob


def spline_from_blender(name: str, collection: str = "Collection") -> tuple[Spline, Transform]:
    """Reads the first spline of the named curve object in Blender."""
    ob = bpy.data.collections[collection].objects[name]
    bl_spline = ob.data.splines[0]
    points = [CurvePoint(Vector.from_sequence(bp.co),
                         Vector.from_sequence(bp.handle_left),
                         Vector.from_sequence(bp.handle_right))
              for bp in bl_spline.bezier_points]
    transform = Transform(location = Vector.from_sequence(ob.location),
                          rotation = Vector.from_sequence(ob.rotation_euler),
                          scale = Vector.from_sequence(ob.scale))
    return Spline.from_points(points, is_looping = bl_spline.use_cyclic_u), transform
