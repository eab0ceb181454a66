"""
Interfaces pour les capteurs et la console.

Ces interfaces permettent d'utiliser le meme code de traitement
avec des donnees simulees ou des flux de test.
"""

from .sensor_interface import (
    ISensorSource,
    SensorType,
    TimestampData,
    LidarReadings,
    CameraReadings,
    ImuReadings,
)

from .console_interface import (
    ConsoleIO,
    parse_int,
    parse_float,
)

__all__ = [
    # Capteurs
    'ISensorSource',
    'SensorType',
    'TimestampData',
    'LidarReadings',
    'CameraReadings',
    'ImuReadings',
    # Console
    'ConsoleIO',
    'parse_int',
    'parse_float',
]
