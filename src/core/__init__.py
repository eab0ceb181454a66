"""
Core module.
- Pose kernel
- Sensor configuration
"""

from .config import SensorConfig
from .pose import (
    PI,
    Pose2D,
    normalize_angle_deg,
    move_forward,
    move_backward,
    turn_left,
    turn_right,
    reset_pose,
    pose_status,
)

__all__ = [
    'SensorConfig',
    'PI',
    'Pose2D',
    'normalize_angle_deg',
    'move_forward',
    'move_backward',
    'turn_left',
    'turn_right',
    'reset_pose',
    'pose_status',
]
