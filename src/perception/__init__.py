"""
Perception module for sensor data processing.

Components:
- SensorClassifier: Per-sample features and GOOD/POOR, mode labels
- SensorStatistics: Run totals, histories and summary
"""

from .sensor_classifier import (
    SensorClassifier,
    SampleAssessment,
    LidarAssessment,
    CameraAssessment,
    ImuAssessment,
)

from .sensor_statistics import (
    SensorStatistics,
    SensorCounter,
    HistoryRange,
    history_range,
)

__all__ = [
    # Classification
    'SensorClassifier',
    'SampleAssessment',
    'LidarAssessment',
    'CameraAssessment',
    'ImuAssessment',

    # Statistics
    'SensorStatistics',
    'SensorCounter',
    'HistoryRange',
    'history_range',
]
