"""
Pose Kernel

Planar robot pose and the operations that change it.

Conventions:
- X = forward at heading 0
- Y = left
- Heading in degrees, counter-clockwise from X, kept in [0, 360)

Every operation is pure: it returns a new Pose2D and leaves its input untouched.
"""

import math
from dataclasses import dataclass
from typing import Tuple

# Fixed literal, printed coordinates depend on it (not math.pi)
PI = 3.14159

FULL_TURN_DEG = 360.0


@dataclass(frozen=True)
class Pose2D:
    """2D pose (position + heading)."""
    x: float = 0.0
    y: float = 0.0
    theta_deg: float = 0.0  # Heading in degrees, [0, 360)

    @property
    def theta_rad(self) -> float:
        return self.theta_deg * PI / 180.0

    @property
    def position(self) -> Tuple[float, float]:
        """Position as tuple."""
        return (self.x, self.y)


def normalize_angle_deg(angle: float) -> float:
    """Normalize angle to [0, 360)."""
    angle = math.fmod(angle, FULL_TURN_DEG)
    if angle < 0.0:
        angle += FULL_TURN_DEG
    # -1e-17 + 360.0 rounds to 360.0, fmod(-360, 360) is -0.0
    if angle >= FULL_TURN_DEG or angle == 0.0:
        angle = 0.0
    return angle


def _require_positive(value: float, name: str):
    if not value > 0.0:
        raise ValueError(f"{name} must be positive, got {value}")


def _translate(pose: Pose2D, distance: float) -> Pose2D:
    angle_rad = pose.theta_rad
    return Pose2D(
        x=pose.x + distance * math.cos(angle_rad),
        y=pose.y + distance * math.sin(angle_rad),
        theta_deg=pose.theta_deg,
    )


def move_forward(pose: Pose2D, distance: float) -> Pose2D:
    """
    Move along the current heading.

    Args:
        pose: Current pose
        distance: Distance in meters, must be > 0

    Returns:
        New pose, heading unchanged
    """
    _require_positive(distance, "distance")
    return _translate(pose, distance)


def move_backward(pose: Pose2D, distance: float) -> Pose2D:
    """Move against the current heading (distance > 0)."""
    _require_positive(distance, "distance")
    return _translate(pose, -distance)


def turn_left(pose: Pose2D, angle_deg: float) -> Pose2D:
    """Rotate counter-clockwise by angle_deg (> 0)."""
    _require_positive(angle_deg, "angle")
    return Pose2D(pose.x, pose.y, normalize_angle_deg(pose.theta_deg + angle_deg))


def turn_right(pose: Pose2D, angle_deg: float) -> Pose2D:
    """Rotate clockwise by angle_deg (> 0)."""
    _require_positive(angle_deg, "angle")
    return Pose2D(pose.x, pose.y, normalize_angle_deg(pose.theta_deg - angle_deg))


def reset_pose() -> Pose2D:
    """Return the origin pose (0, 0, 0)."""
    return Pose2D()


def pose_status(pose: Pose2D) -> Tuple[float, float, float]:
    """Snapshot of (x, y, theta_deg)."""
    return (pose.x, pose.y, pose.theta_deg)
