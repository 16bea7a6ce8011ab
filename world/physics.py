"""
buffet_race module: world/physics.py

Arena kinematics on the x/z plane:
- players steer straight at a point with a fixed speed and never overshoot it
- heading is the yaw of the movement direction, wrapped to [-pi, pi]
- a cosmetic jump arc integrates y under constant gravity
- clamp_to_arena keeps x/z inside [-map_size, map_size]
"""

from __future__ import annotations
import math
from typing import Tuple

import buffet_config as config
from world.entities import Vec3, ZERO


def wrap_angle(a: float) -> float:
    while a > math.pi:
        a -= 2 * math.pi
    while a < -math.pi:
        a += 2 * math.pi
    return a


def heading_toward(origin: Vec3, target: Vec3) -> float:
    return wrap_angle(math.atan2(target.z - origin.z, target.x - origin.x))


def move_toward(
    position: Vec3,
    target: Vec3,
    speed: float,
    dt: float,
) -> Tuple[Vec3, Vec3, float]:
    """
    Step `position` toward `target` on the horizontal plane.

    Returns:
        (new_position, velocity, distance_left). Velocity is zero when the
        player is already standing on the target.
    """
    dx = target.x - position.x
    dz = target.z - position.z
    dist = math.hypot(dx, dz)
    if dist <= 1e-9:
        return position, ZERO, 0.0

    ux = dx / dist
    uz = dz / dist
    step = min(speed * dt, dist)

    moved = Vec3(position.x + ux * step, position.y, position.z + uz * step)
    velocity = Vec3(ux * speed, 0.0, uz * speed)
    return moved, velocity, dist - step


def integrate_jump(
    y: float,
    vertical_velocity: float,
    dt: float,
    gravity: float = config.GRAVITY,
    ground: float = config.GROUND_HEIGHT,
) -> Tuple[float, float, bool]:
    """
    Advance a jump arc by dt. Returns (y, vertical_velocity, still_jumping).
    """
    vertical_velocity += gravity * dt
    y += vertical_velocity * dt
    if y <= ground:
        return ground, 0.0, False
    return y, vertical_velocity, True


def clamp_to_arena(position: Vec3, map_size: float) -> Vec3:
    x = max(-map_size, min(map_size, position.x))
    z = max(-map_size, min(map_size, position.z))
    if x == position.x and z == position.z:
        return position
    return Vec3(x, position.y, z)
