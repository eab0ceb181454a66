"""
Rapport console du systeme triple capteur.

Mise en forme texte des blocs par instant et du resume final.
Tous les reels sont affiches avec deux decimales.
"""

from typing import List

from perception.sensor_classifier import (
    SampleAssessment, LidarAssessment, CameraAssessment, ImuAssessment
)
from perception.sensor_statistics import SensorStatistics, HistoryRange

BANNER = "=== ROBOT TRIPLE-SENSOR SYSTEM ==="
SUMMARY_HEADER = "=== SUMMARY STATISTICS ==="
TERMINATOR = "=== END OF PROGRAM ==="


def fmt(value: float) -> str:
    """Reel avec deux decimales."""
    return f"{value:.2f}"


def format_banner(num_timestamps: int) -> List[str]:
    return [
        BANNER,
        "",
        f"Generating sensor data for {num_timestamps} timestamps...",
        "",
    ]


def format_lidar_line(lidar: LidarAssessment) -> str:
    beams = ", ".join(fmt(r) for r in lidar.readings)
    return (f"LIDAR: [{beams}] Avg: {fmt(lidar.average)} m, "
            f"Obstacles: {lidar.obstacle_count}, Status: {lidar.status}")


def format_camera_line(camera: CameraAssessment) -> str:
    red, green, blue = camera.rgb
    return (f"Camera: RGB({red}, {green}, {blue}), "
            f"Brightness: {fmt(camera.brightness)}, "
            f"Mode: {camera.mode}, Status: {camera.status}")


def format_imu_line(imu: ImuAssessment) -> str:
    roll, pitch, yaw = imu.rpy
    return (f"IMU: RPY({fmt(roll)}, {fmt(pitch)}, {fmt(yaw)}), "
            f"Total Rotation: {fmt(imu.total_rotation)} deg, "
            f"Mode: {imu.mode}, Status: {imu.status}")


def format_sample(assessment: SampleAssessment) -> List[str]:
    """Bloc d'un instant (en-tete, trois lignes capteurs, ligne vide)."""
    return [
        f"Processing Timestamp: {assessment.timestamp}",
        format_lidar_line(assessment.lidar),
        format_camera_line(assessment.camera),
        format_imu_line(assessment.imu),
        "",
    ]


def _format_range(label: str, unit: str, extrema: HistoryRange) -> str:
    return (f"{label}: {fmt(extrema.minimum)}{unit} (Timestamp {extrema.min_timestamp}) "
            f"to {fmt(extrema.maximum)}{unit} (Timestamp {extrema.max_timestamp})")


def format_summary(stats: SensorStatistics) -> List[str]:
    """
    Resume final.

    Les lignes de plage ne sont emises que pour les historiques non vides.
    """
    lines = [
        SUMMARY_HEADER,
        f"Total Sensor Processing Operations: {stats.total_operations}",
        f"Valid Sensor Readings: {stats.total_valid} / {stats.total_operations} "
        f"({fmt(stats.valid_percentage)}%)",
        "Reliability by Sensor:",
    ]
    for counter in stats.counters:
        lines.append(f"  - {counter.sensor_type.label}: {fmt(counter.reliability)}%")

    lines += [
        f"Average LIDAR Distance: {fmt(stats.average_lidar_distance)} m",
        f"Average Camera Brightness: {fmt(stats.average_camera_brightness)}",
        f"Average IMU Total Rotation: {fmt(stats.average_imu_rotation)} deg",
        f"Total Obstacles Detected: {stats.total_obstacles_detected}",
        f"DAY/NIGHT Count: {stats.day_mode_count} / {stats.night_mode_count}",
        f"STABLE/UNSTABLE Count: {stats.stable_mode_count} / {stats.unstable_mode_count}",
        "",
    ]

    ranges = [
        ("LIDAR Average Range", " m", stats.lidar_range),
        ("Camera Brightness Range", "", stats.brightness_range),
        ("IMU Rotation Range", " deg", stats.rotation_range),
    ]
    for label, unit, extrema in ranges:
        if extrema is not None:
            lines.append(_format_range(label, unit, extrema))

    lines += ["", TERMINATOR]
    return lines
