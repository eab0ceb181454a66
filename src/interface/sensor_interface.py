"""
Interfaces abstraites pour les sources de donnees capteurs.

Ces interfaces definissent le contrat que doivent respecter
les generateurs de donnees (simules ou rejoues).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

LidarReadings = Tuple[float, ...]              # Distances en metres
CameraReadings = Tuple[int, int, int]          # (R, G, B)
ImuReadings = Tuple[float, float, float]       # (roll, pitch, yaw) en degres


class SensorType(Enum):
    """Type de capteur, dans l'ordre d'affichage."""
    LIDAR = "LIDAR"
    CAMERA = "Camera"
    IMU = "IMU"

    @property
    def label(self) -> str:
        """Nom affiche dans le rapport."""
        return self.value


@dataclass(frozen=True)
class TimestampData:
    """Mesures des trois capteurs a un instant donne."""
    timestamp: int                    # Index 0-based, strictement croissant
    lidar_readings: LidarReadings
    camera_readings: CameraReadings
    imu_readings: ImuReadings


class ISensorSource(ABC):
    """Interface abstraite pour une source de mesures."""

    @abstractmethod
    def generate(self, count: int) -> List[TimestampData]:
        """
        Produit toutes les mesures d'un run.

        Args:
            count: Nombre d'instants a produire

        Returns:
            Liste de `count` TimestampData, timestamps 0..count-1
        """
        pass
