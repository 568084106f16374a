"""Homogeneous 4x4 transformation matrices for the rendering pipeline."""

from __future__ import annotations

import math

from rasterlab.geometry import Matrix, Vector, identity_matrix


def translation_matrix(x: float, y: float, z: float) -> Matrix:
    """Matrix that moves points by (x, y, z)."""
    result = identity_matrix(4)
    result.elements[0][3] = x
    result.elements[1][3] = y
    result.elements[2][3] = z
    return result


def scaling_matrix(x: float, y: float, z: float) -> Matrix:
    """Matrix that scales the three axes independently."""
    result = identity_matrix(4)
    result.elements[0][0] = x
    result.elements[1][1] = y
    result.elements[2][2] = z
    return result


def rotation_matrix(ax: float, ay: float, az: float, angle: float) -> Matrix:
    """Matrix rotating by ``angle`` degrees about the axis (ax, ay, az)."""
    axis = Vector(ax, ay, az).normalize()
    result = identity_matrix(4)
    bases = (Vector(1, 0, 0), Vector(0, 1, 0), Vector(0, 0, 1))
    for column, basis in enumerate(bases):
        rotated = basis.rotate(axis, angle)
        for row, value in enumerate(rotated):
            result.elements[row][column] = value
    return result


def view_matrix(eye: Vector, look: Vector, up: Vector) -> Matrix:
    """Camera matrix placing ``eye`` at the origin looking down -z."""
    look_direction = (look - eye).normalize()
    right = look_direction.cross(up).normalize()
    true_up = right.cross(look_direction).normalize()

    rotation = Matrix(4, 4)
    rotation.elements[0][:3] = list(right)
    rotation.elements[1][:3] = list(true_up)
    rotation.elements[2][:3] = [-value for value in look_direction]
    rotation.elements[3][3] = 1.0

    return rotation @ translation_matrix(-eye.x, -eye.y, -eye.z)


def projection_matrix(fov_y: float, aspect_ratio: float, near: float, far: float) -> Matrix:
    """Perspective projection for a vertical field of view in degrees."""
    fov_x = fov_y * aspect_ratio
    t = near * math.tan(math.radians(fov_y) / 2)
    r = near * math.tan(math.radians(fov_x) / 2)

    projection = Matrix(4, 4)
    projection.elements[0][0] = near / r
    projection.elements[1][1] = near / t
    projection.elements[2][2] = -(far + near) / (far - near)
    projection.elements[2][3] = -(2 * far * near) / (far - near)
    projection.elements[3][2] = -1.0
    return projection