"""
Sensor Classifier

Extracts features from one TimestampData and labels each sensor:
- LIDAR: average distance, obstacle count, validity
- Camera: brightness, DAY/NIGHT mode, validity
- IMU: total rotation, STABLE/UNSTABLE mode, validity
"""

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from core.config import SensorConfig
from interface.sensor_interface import (
    TimestampData, LidarReadings, CameraReadings, ImuReadings
)

GOOD = "GOOD"
POOR = "POOR"


def status_label(is_valid: bool) -> str:
    return GOOD if is_valid else POOR


@dataclass(frozen=True)
class LidarAssessment:
    """LIDAR features for one sample."""
    readings: LidarReadings
    average: float          # meters
    obstacle_count: int
    is_valid: bool          # every beam above lidar_min_valid

    @property
    def status(self) -> str:
        return status_label(self.is_valid)


@dataclass(frozen=True)
class CameraAssessment:
    """Camera features for one sample."""
    rgb: CameraReadings
    brightness: float
    is_day: bool
    is_valid: bool          # brightness above brightness_threshold

    @property
    def mode(self) -> str:
        return "DAY" if self.is_day else "NIGHT"

    @property
    def status(self) -> str:
        return status_label(self.is_valid)


@dataclass(frozen=True)
class ImuAssessment:
    """IMU features for one sample."""
    rpy: ImuReadings
    total_rotation: float   # degrees
    is_stable: bool
    is_valid: bool          # every axis inside the declared range

    @property
    def mode(self) -> str:
        return "STABLE" if self.is_stable else "UNSTABLE"

    @property
    def status(self) -> str:
        return status_label(self.is_valid)


@dataclass(frozen=True)
class SampleAssessment:
    """Classification of the three sensors at one timestamp."""
    timestamp: int
    lidar: LidarAssessment
    camera: CameraAssessment
    imu: ImuAssessment


class SensorClassifier:
    """
    Per-sample sensor classifier.

    Usage:
        classifier = SensorClassifier(config)
        for sample in samples:
            assessment = classifier.classify(sample)
            print(assessment.lidar.status, assessment.camera.mode)
    """

    def __init__(self, config: Optional[SensorConfig] = None):
        self.config = config or SensorConfig()

    def classify(self, sample: TimestampData) -> SampleAssessment:
        """Classify the three sensors of a sample."""
        return SampleAssessment(
            timestamp=sample.timestamp,
            lidar=self.classify_lidar(sample.lidar_readings),
            camera=self.classify_camera(sample.camera_readings),
            imu=self.classify_imu(sample.imu_readings),
        )

    def classify_lidar(self, readings: LidarReadings) -> LidarAssessment:
        """
        LIDAR features.

        An empty beam list has average 0.0, no obstacles and is valid.
        """
        distances = np.asarray(readings, dtype=float)

        average = float(distances.mean()) if distances.size else 0.0
        obstacle_count = int(np.count_nonzero(distances < self.config.obstacle_threshold))
        is_valid = bool(np.all(distances > self.config.lidar_min_valid))

        return LidarAssessment(
            readings=tuple(readings),
            average=average,
            obstacle_count=obstacle_count,
            is_valid=is_valid,
        )

    def classify_camera(self, rgb: CameraReadings) -> CameraAssessment:
        """Camera features (brightness = mean of the three channels)."""
        red, green, blue = rgb
        brightness = (red + green + blue) / 3.0

        return CameraAssessment(
            rgb=(red, green, blue),
            brightness=brightness,
            is_day=brightness > self.config.day_night_threshold,
            is_valid=brightness > self.config.brightness_threshold,
        )

    def classify_imu(self, rpy: ImuReadings) -> ImuAssessment:
        """IMU features (total rotation = norm of roll/pitch/yaw)."""
        roll, pitch, yaw = rpy
        total_rotation = math.sqrt(roll * roll + pitch * pitch + yaw * yaw)

        limit = self.config.imu_stability_threshold
        is_stable = abs(roll) < limit and abs(pitch) < limit and abs(yaw) < limit

        lo = self.config.imu_min_rotation
        hi = self.config.imu_max_rotation
        is_valid = lo <= roll <= hi and lo <= pitch <= hi and lo <= yaw <= hi

        return ImuAssessment(
            rpy=(roll, pitch, yaw),
            total_rotation=total_rotation,
            is_stable=is_stable,
            is_valid=is_valid,
        )
