"""
Sensor Statistics

Running totals and histories over a sensor run, and the end-of-run summary:
- per-sensor total/valid counters and reliability
- running sums and means
- mode counters (DAY/NIGHT, STABLE/UNSTABLE)
- min/max of each history with the timestamp where it occurred
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from interface.sensor_interface import SensorType
from .sensor_classifier import SampleAssessment

PERCENTAGE_SCALE = 100.0


def percentage(part: int, whole: int) -> float:
    """100 * part / whole, 0.0 when whole is 0."""
    if whole <= 0:
        return 0.0
    return part / whole * PERCENTAGE_SCALE


def mean_or_zero(total: float, count: int) -> float:
    return total / count if count > 0 else 0.0


@dataclass
class SensorCounter:
    """Total/valid reading counts of one sensor."""
    sensor_type: SensorType
    total: int = 0
    valid: int = 0

    def record(self, is_valid: bool):
        self.total += 1
        if is_valid:
            self.valid += 1

    @property
    def reliability(self) -> float:
        """Valid readings in percent."""
        return percentage(self.valid, self.total)


@dataclass(frozen=True)
class HistoryRange:
    """Extrema of a history and the timestamps where they occurred."""
    minimum: float
    min_timestamp: int
    maximum: float
    max_timestamp: int


def history_range(history: List[float], timestamps: List[int]) -> Optional[HistoryRange]:
    """
    Find min and max of a history.

    Ties: the FIRST occurrence of the minimum, the LAST occurrence of the maximum.

    Args:
        history: Values in processing order
        timestamps: Timestamp of each value (same length)

    Returns:
        HistoryRange, or None if the history is empty
    """
    if not history:
        return None
    if len(history) != len(timestamps):
        raise ValueError("history and timestamps must have the same length")

    values = np.asarray(history, dtype=float)
    min_index = int(np.argmin(values))
    # argmax returns the first maximum, search from the end for the last one
    max_index = len(values) - 1 - int(np.argmax(values[::-1]))

    return HistoryRange(
        minimum=float(values[min_index]),
        min_timestamp=timestamps[min_index],
        maximum=float(values[max_index]),
        max_timestamp=timestamps[max_index],
    )


@dataclass
class SensorStatistics:
    """
    Aggregates SampleAssessment records over a run.

    Usage:
        stats = SensorStatistics()
        for sample in samples:
            stats.update(classifier.classify(sample))
        print(stats.valid_percentage)
        print(stats.lidar_range)
    """
    lidar: SensorCounter = field(default_factory=lambda: SensorCounter(SensorType.LIDAR))
    camera: SensorCounter = field(default_factory=lambda: SensorCounter(SensorType.CAMERA))
    imu: SensorCounter = field(default_factory=lambda: SensorCounter(SensorType.IMU))

    # Running sums
    total_lidar_avg_distance: float = 0.0
    total_camera_brightness: float = 0.0
    total_imu_rotation: float = 0.0

    # Counters
    total_obstacles_detected: int = 0
    day_mode_count: int = 0
    night_mode_count: int = 0
    stable_mode_count: int = 0
    unstable_mode_count: int = 0

    # Histories, indexed in processing order
    lidar_average_history: List[float] = field(default_factory=list)
    camera_brightness_history: List[float] = field(default_factory=list)
    imu_rotation_history: List[float] = field(default_factory=list)
    processed_timestamps: List[int] = field(default_factory=list)

    def update(self, assessment: SampleAssessment):
        """Add one classified sample."""
        self.processed_timestamps.append(assessment.timestamp)

        # LIDAR
        lidar = assessment.lidar
        self.lidar_average_history.append(lidar.average)
        self.lidar.record(lidar.is_valid)
        self.total_lidar_avg_distance += lidar.average
        self.total_obstacles_detected += lidar.obstacle_count

        # Camera
        camera = assessment.camera
        self.camera_brightness_history.append(camera.brightness)
        self.camera.record(camera.is_valid)
        self.total_camera_brightness += camera.brightness
        if camera.is_day:
            self.day_mode_count += 1
        else:
            self.night_mode_count += 1

        # IMU
        imu = assessment.imu
        self.imu_rotation_history.append(imu.total_rotation)
        self.imu.record(imu.is_valid)
        self.total_imu_rotation += imu.total_rotation
        if imu.is_stable:
            self.stable_mode_count += 1
        else:
            self.unstable_mode_count += 1

    @property
    def counters(self) -> Tuple[SensorCounter, SensorCounter, SensorCounter]:
        """Per-sensor counters in report order (LIDAR, Camera, IMU)."""
        return (self.lidar, self.camera, self.imu)

    @property
    def total_operations(self) -> int:
        return sum(c.total for c in self.counters)

    @property
    def total_valid(self) -> int:
        return sum(c.valid for c in self.counters)

    @property
    def valid_percentage(self) -> float:
        return percentage(self.total_valid, self.total_operations)

    @property
    def average_lidar_distance(self) -> float:
        return mean_or_zero(self.total_lidar_avg_distance, self.lidar.total)

    @property
    def average_camera_brightness(self) -> float:
        return mean_or_zero(self.total_camera_brightness, self.camera.total)

    @property
    def average_imu_rotation(self) -> float:
        return mean_or_zero(self.total_imu_rotation, self.imu.total)

    @property
    def lidar_range(self) -> Optional[HistoryRange]:
        return history_range(self.lidar_average_history, self.processed_timestamps)

    @property
    def brightness_range(self) -> Optional[HistoryRange]:
        return history_range(self.camera_brightness_history, self.processed_timestamps)

    @property
    def rotation_range(self) -> Optional[HistoryRange]:
        return history_range(self.imu_rotation_history, self.processed_timestamps)
