"""
Module de simulation pour tester sans hardware.

Composants:
- SensorDataGenerator: Genere des mesures LIDAR / Camera / IMU aleatoires
"""

from .sensor_simulator import SensorDataGenerator

__all__ = [
    'SensorDataGenerator',
]
