"""
Sensor Configuration

Fixed parameters of the triple-sensor system (LIDAR, camera, IMU).

Values are set once at load time. The summarizer, the generators and the
classifier all read the same SensorConfig instance.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SensorConfig:
    """Sensor system parameters."""
    # Run length
    num_timestamps: int = 5                 # samples per run

    # LIDAR
    lidar_readings_count: int = 5           # beams per sample
    lidar_min_range: float = 0.1            # meters
    lidar_max_range: float = 10.0           # meters
    lidar_min_valid: float = 0.5            # meters - every beam must exceed this
    obstacle_threshold: float = 1.0         # meters - closer beams are obstacles

    # Camera
    rgb_min: int = 0
    rgb_max: int = 255
    brightness_threshold: float = 50.0      # GOOD above this
    day_night_threshold: float = 128.0      # DAY above this

    # IMU
    imu_min_rotation: float = -45.0         # degrees
    imu_max_rotation: float = 45.0          # degrees
    imu_stability_threshold: float = 5.0    # degrees, per axis

    def __post_init__(self):
        if self.num_timestamps < 0:
            raise ValueError("num_timestamps must be >= 0")
        if self.lidar_readings_count < 0:
            raise ValueError("lidar_readings_count must be >= 0")
        if self.lidar_min_range > self.lidar_max_range:
            raise ValueError("lidar_min_range must be <= lidar_max_range")
        if not 0 <= self.rgb_min <= self.rgb_max <= 255:
            raise ValueError("RGB bounds must satisfy 0 <= rgb_min <= rgb_max <= 255")
        if self.imu_min_rotation > self.imu_max_rotation:
            raise ValueError("imu_min_rotation must be <= imu_max_rotation")
        if self.imu_stability_threshold < 0.0:
            raise ValueError("imu_stability_threshold must be >= 0")

    def with_timestamps(self, num_timestamps: int) -> 'SensorConfig':
        """Return a copy with another sample count."""
        return replace(self, num_timestamps=num_timestamps)
