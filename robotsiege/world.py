"""Game state and rules: walking robots, projectiles and the player's cannon."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional, Protocol

from robotsiege.vector import Vector3

RGBA = tuple[float, float, float, float]

ROBOT_BODY_WIDTH = 12.0
ROBOT_BODY_LENGTH = 10.0
ROBOT_BODY_DEPTH = 8.0
HEAD_WIDTH = 0.3 * ROBOT_BODY_WIDTH
UPPER_ARM_LENGTH = ROBOT_BODY_LENGTH
UPPER_ARM_WIDTH = 0.2 * ROBOT_BODY_WIDTH
GUN_WIDTH = UPPER_ARM_WIDTH
GUN_LENGTH = UPPER_ARM_LENGTH / 2.0
GUN_DEPTH = UPPER_ARM_WIDTH

MAX_PROJECTILES = 10
BREAKING_FRAMES = 50
INITIAL_ROBOT_COUNT = 3
INITIAL_FIRING_RATE = 200.0
MIN_FIRING_RATE = 50.0
ROBOT_SPACING = 20.0
ARENA_HALF_SIZE = 50.0
CANNON_OFFSET_DISTANCE = 10.0
MOUSE_SENSITIVITY = 0.1
MAX_YAW = 180.0
MAX_PITCH = 45.0
ENEMY_PROJECTILE_SPEED = 2.0
DEFENSIVE_PROJECTILE_SPEED = 3.0
LASER_RADIUS = 0.5

GREEN_DIFFUSE: RGBA = (0.05, 0.2, 0.05, 0.1)
INITIAL_CANNON_COLOR: RGBA = (0.0, 1.0, 0.0, 1.0)
INITIAL_CAMERA = Vector3(0.0, 15.0, 100.0)


class RandomSource(Protocol):
    """The part of :class:`random.Random` the game relies on."""

    def randrange(self, stop: int) -> int: ...


@dataclass
class Robot:
    """An enemy robot walking on the ground plane."""

    x_offset: float
    z_offset: float = 0.0
    speed: float = 0.1
    direction: float = 0.0
    disabled: bool = False
    breaking_timer: int = 0


@dataclass
class Projectile:
    """A straight-flying projectile."""

    position: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = Vector3(0.0, 0.0, -1.0)
    speed: float = 0.0
    active: bool = False

    def advance(self) -> None:
        self.position = self.position + self.direction * self.speed


def camera_direction(yaw: float, pitch: float) -> Vector3:
    """Return the unit view direction for a yaw and pitch given in degrees."""
    yaw_rad = math.radians(yaw)
    pitch_rad = math.radians(pitch)
    return Vector3(
        math.sin(yaw_rad) * math.cos(pitch_rad),
        math.sin(pitch_rad),
        -math.cos(yaw_rad) * math.cos(pitch_rad),
    )


def cannon_world_position(robot: Robot, robot_angle: float) -> Vector3:
    """Return where a robot's arm cannon sits in world space."""
    angle = math.radians(robot_angle)
    local_x = -(0.5 * ROBOT_BODY_WIDTH + GUN_WIDTH * 0.7)
    local_y = 0.3 * ROBOT_BODY_LENGTH - 0.8 * UPPER_ARM_LENGTH
    local_z = 1.3 * ROBOT_BODY_DEPTH + GUN_LENGTH
    rotated_x = local_x * math.cos(angle) - local_z * math.sin(angle)
    rotated_z = local_x * math.sin(angle) + local_z * math.cos(angle)
    return Vector3(robot.x_offset + rotated_x, local_y, robot.z_offset + rotated_z)


def laser_hits_robot(laser: Projectile, robot: Robot) -> bool:
    """Whether a laser is within the robot's horizontal hit radius."""
    dx = laser.position.x - robot.x_offset
    dz = laser.position.z - robot.z_offset
    return math.hypot(dx, dz) < ROBOT_BODY_WIDTH * 0.5 + LASER_RADIUS


@dataclass
class WalkCycle:
    """Leg joint angles shared by all robots, swung back and forth."""

    hip_left: float = 0.0
    knee_left: float = 0.0
    ankle_left: float = 0.0
    lower_leg_left: float = 0.0
    hip_right: float = 0.0
    knee_right: float = 0.0
    ankle_right: float = 0.0
    lower_leg_right: float = 0.0
    walking: bool = False
    walking_forward: bool = True
    z_offset: float = 0.0

    def step(self, robot_count: int) -> bool:
        """Advance the swing once per robot; return whether walking goes on."""
        if not self.walking:
            return False
        for i in range(robot_count):
            angle_step = 1.0 + i * 0.2
            if self.walking_forward:
                if self.hip_left < 50.0:
                    self._swing_left(angle_step)
                if self.hip_right > -50.0:
                    self._swing_right(-angle_step)
                if self.hip_left >= 50.0 and self.hip_right <= -50.0:
                    self.walking_forward = False
                self.z_offset += 0.05
            else:
                if self.hip_left > 0.0:
                    self._swing_left(-angle_step)
                if self.hip_right < 0.0:
                    self._swing_right(angle_step)
                if self.hip_left <= 0.0 and self.hip_right >= 0.0:
                    self.walking_forward = True
        return self.walking

    def _swing_left(self, amount: float) -> None:
        self.hip_left += amount
        self.knee_left -= amount * 0.75
        self.ankle_left += amount * 0.5
        self.lower_leg_left += amount

    def _swing_right(self, amount: float) -> None:
        self.hip_right += amount
        self.knee_right -= amount * 0.75
        self.ankle_right += amount * 0.5
        self.lower_leg_right += amount


class Game:
    """The whole game world, advanced by periodic update calls."""

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.score = 0
        self.robot_count = INITIAL_ROBOT_COUNT
        self.firing_rate = INITIAL_FIRING_RATE
        self.speed_multiplier = 1.0
        self.spacing = ROBOT_SPACING
        self.robots: list[Robot] = []

        self.camera = INITIAL_CAMERA
        self.camera_yaw = 0.0
        self.camera_pitch = 0.0
        self.barrel_yaw_angle = 0.0
        self.barrel_tilt_angle = 0.0
        self._last_mouse: Optional[tuple[int, int]] = None

        self.robot_angle = 0.0
        self.neck_angle = 0.0
        self.spin_cannon_enabled = True
        self.cannon_spin_angle = 0.0
        self.walk = WalkCycle(walking=True)

        self.cannon_disabled = False
        self.cannon_fade_progress = 0.0
        self.cannon_color: RGBA = INITIAL_CANNON_COLOR
        self.game_disabled = False

        self.enemy_projectiles: list[Projectile] = []
        self.defensive_projectiles: list[Projectile] = []

        self.initialize_robots()
        self._clear_enemy_projectiles()

    @property
    def fading(self) -> bool:
        """Whether the disabled cannon is still fading to black."""
        return self.cannon_disabled and self.cannon_fade_progress < 1.0

    def initialize_robots(self) -> None:
        """Line up a fresh set of ``robot_count`` robots."""
        centre = (self.robot_count - 1) * 0.5
        self.robots = [
            Robot(
                x_offset=(i - centre) * self.spacing,
                speed=(0.1 + 0.05 * i) * self.speed_multiplier,
            )
            for i in range(self.robot_count)
        ]

    def next_level(self) -> None:
        """Add a robot, score a point and raise the difficulty."""
        self.robot_count += 1
        self.score += 1
        self.firing_rate = max(MIN_FIRING_RATE, self.firing_rate * 0.9)
        self.speed_multiplier += 0.1
        self.initialize_robots()

    def reset(self) -> None:
        """Start over with a fresh cannon, robots and projectiles."""
        self.score = 0
        self.robot_count = INITIAL_ROBOT_COUNT
        self.cannon_disabled = False
        self.cannon_fade_progress = 0.0
        self.cannon_color = GREEN_DIFFUSE
        self.initialize_robots()
        self._clear_enemy_projectiles()
        self.defensive_projectiles.clear()

    def _clear_enemy_projectiles(self) -> None:
        self.enemy_projectiles = [Projectile() for _ in range(MAX_PROJECTILES)]

    def _jitter(self) -> float:
        return self.rng.randrange(100) / 500.0 - 0.1

    def fire_enemy_projectile(
        self, start: Vector3, direction: Vector3
    ) -> Optional[Projectile]:
        """Launch an enemy shot from a free slot; return it, or None if all are busy."""
        for slot, current in enumerate(self.enemy_projectiles):
            if current.active:
                continue
            aim = Vector3(
                direction.x + self._jitter(),
                direction.y + self._jitter(),
                direction.z + self._jitter(),
            )
            aim = -(aim - Vector3(0.0, 0.3, 0.0))
            heading = aim.normalized() if aim.length() > 0.0 else Vector3(0.0, 0.0, -1.0)
            projectile = Projectile(start, heading, ENEMY_PROJECTILE_SPEED, True)
            self.enemy_projectiles[slot] = projectile
            return projectile
        return None

    def fire_random_enemy_projectiles(self) -> list[Projectile]:
        """Let each working robot fire with even odds; return the shots fired."""
        fired = []
        for robot in self.robots:
            if robot.disabled:
                continue
            if self.rng.randrange(100) < 50:
                shot = self.fire_enemy_projectile(
                    cannon_world_position(robot, self.robot_angle),
                    Vector3(0.0, 0.0, -1.0),
                )
                if shot is not None:
                    fired.append(shot)
        return fired

    def _in_cannon_box(self, position: Vector3) -> bool:
        return (
            abs(position.x - self.camera.x) < 4.0
            and abs(position.y - (self.camera.y - 5.0)) < 2.0
            and abs(position.z - (self.camera.z - 10.0)) < 2.0
        )

    def update_enemy_projectiles(self) -> bool:
        """Move enemy shots; return whether one struck the cannon."""
        hit = False
        for projectile in self.enemy_projectiles:
            if not projectile.active:
                continue
            projectile.advance()
            if not self.cannon_disabled and self._in_cannon_box(projectile.position):
                self.cannon_disabled = True
                projectile.active = False
                hit = True
            pos = projectile.position
            if pos.z > 100 or not -100 <= pos.x <= 100 or not -10 <= pos.y <= 50:
                projectile.active = False
        return hit

    def _cannon_position(self) -> Vector3:
        offset = camera_direction(self.camera_yaw, self.camera_pitch)
        return self.camera + offset * CANNON_OFFSET_DISTANCE + Vector3(0.0, -5.0, 0.0)

    def fire_defensive_projectile(self) -> Optional[Projectile]:
        """Fire the player's cannon along the view direction, unless it is disabled."""
        if self.cannon_disabled:
            return None
        heading = camera_direction(self.camera_yaw, self.camera_pitch).normalized()
        projectile = Projectile(
            self._cannon_position(), heading, DEFENSIVE_PROJECTILE_SPEED, True
        )
        self.defensive_projectiles.append(projectile)
        return projectile

    def update_defensive_projectiles(self) -> list[Robot]:
        """Move the player's shots, disable robots they hit; return those robots."""
        hit_robots = []
        for projectile in self.defensive_projectiles:
            if not projectile.active:
                continue
            projectile.advance()
            for robot in self.robots:
                if not robot.disabled and laser_hits_robot(projectile, robot):
                    robot.disabled = True
                    robot.breaking_timer = BREAKING_FRAMES
                    projectile.active = False
                    hit_robots.append(robot)
                    break
            pos = projectile.position
            if abs(pos.x) > 100 or abs(pos.y) > 50 or abs(pos.z) > 100:
                projectile.active = False
        self.defensive_projectiles = [p for p in self.defensive_projectiles if p.active]
        return hit_robots

    def check_cannon_hit(self) -> bool:
        """Disable the cannon if any enemy shot is inside it; return whether one was."""
        hit = False
        for projectile in self.enemy_projectiles:
            if projectile.active and self._in_cannon_box(projectile.position):
                self.cannon_disabled = True
                projectile.active = False
                hit = True
        return hit

    def update_cannon_fade(self) -> bool:
        """Fade a disabled cannon one step; return whether fading continues."""
        if not self.cannon_disabled:
            return False
        if self.cannon_fade_progress < 1.0:
            self.cannon_fade_progress += 0.01
            remaining = 1.0 - self.cannon_fade_progress
            red, green, blue, _ = GREEN_DIFFUSE
            self.cannon_color = (remaining * red, remaining * green, remaining * blue, 1.0)
            return True
        self.game_disabled = True
        return False

    def move_robots(self) -> None:
        """Walk the robots, run breaking timers and advance the level when all are down."""
        disabled_count = 0
        for robot in self.robots:
            if robot.disabled:
                if robot.breaking_timer > 0:
                    robot.breaking_timer -= 1
                else:
                    robot.x_offset = 1000.0
                    robot.z_offset = 1000.0
                disabled_count += 1
                continue

            heading = math.radians(robot.direction)
            robot.z_offset += robot.speed * math.cos(heading)
            robot.x_offset += robot.speed * math.sin(heading)

            if self.rng.randrange(100) < 5:
                robot.direction += self.rng.randrange(90) - 45
            if abs(robot.z_offset) > ARENA_HALF_SIZE:
                robot.direction += 180.0
            if abs(robot.x_offset) > ARENA_HALF_SIZE:
                robot.direction += 180.0

        if disabled_count == self.robot_count:
            self.next_level()

    def spin_cannon(self) -> bool:
        """Turn the robots' arm cannons; return whether spinning goes on."""
        if not self.spin_cannon_enabled:
            return False
        self.cannon_spin_angle += 5.0
        if self.cannon_spin_angle > 360.0:
            self.cannon_spin_angle -= 360.0
        return True

    def handle_mouse_motion(self, x: int, y: int) -> None:
        """Turn the camera by the pointer's movement since the last call."""
        last_x, last_y = self._last_mouse if self._last_mouse is not None else (x, y)
        self.camera_yaw += (x - last_x) * MOUSE_SENSITIVITY
        self.camera_pitch -= (y - last_y) * MOUSE_SENSITIVITY
        self.camera_yaw = min(MAX_YAW, max(-MAX_YAW, self.camera_yaw))
        self.camera_pitch = min(MAX_PITCH, max(-MAX_PITCH, self.camera_pitch))
        self.barrel_yaw_angle = -self.camera_yaw
        self.barrel_tilt_angle = self.camera_pitch
        self._last_mouse = (x, y)

    def key_pressed(self, key: str) -> None:
        """Space fires; ``r`` restarts once the game is over."""
        if key == " ":
            self.fire_defensive_projectile()
        elif key == "r" and self.game_disabled:
            self.game_disabled = False
            self.reset()