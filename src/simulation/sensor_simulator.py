"""
Simulateur de capteurs LIDAR / Camera / IMU.

Genere des mesures aleatoires uniformes dans les plages de SensorConfig.
"""

from typing import List, Optional

import numpy as np

from core.config import SensorConfig
from interface.sensor_interface import ISensorSource, TimestampData


class SensorDataGenerator(ISensorSource):
    """
    Generateur de mesures simulees.

    Chaque instant contient:
    - lidar_readings_count distances uniformes dans [lidar_min_range, lidar_max_range]
    - un triplet RGB entier uniforme dans [rgb_min, rgb_max]
    - un triplet (roll, pitch, yaw) uniforme dans [imu_min_rotation, imu_max_rotation]

    Usage:
        generator = SensorDataGenerator(SensorConfig(), seed=42)
        samples = generator.generate(5)
        for sample in samples:
            print(sample.timestamp, sample.camera_readings)
    """

    def __init__(self, config: Optional[SensorConfig] = None,
                 seed: Optional[int] = None):
        """
        Initialise le generateur.

        Args:
            config: Parametres capteurs
            seed: Graine aleatoire (entropie systeme si None)
        """
        self.config = config or SensorConfig()

        # La graine effective est conservee pour rejouer un run
        seed_sequence = np.random.SeedSequence(seed)
        self.seed = seed_sequence.entropy
        self._rng = np.random.default_rng(seed_sequence)

    def generate(self, count: Optional[int] = None) -> List[TimestampData]:
        """
        Genere toutes les mesures d'un run.

        Args:
            count: Nombre d'instants (config.num_timestamps si None)

        Returns:
            Liste de TimestampData, timestamps 0..count-1
        """
        if count is None:
            count = self.config.num_timestamps
        if count < 0:
            raise ValueError("count must be >= 0")

        return [self._generate_sample(timestamp) for timestamp in range(count)]

    def _generate_sample(self, timestamp: int) -> TimestampData:
        """Genere les mesures d'un instant."""
        cfg = self.config

        lidar = self._rng.uniform(cfg.lidar_min_range, cfg.lidar_max_range,
                                  size=cfg.lidar_readings_count)
        rgb = self._rng.integers(cfg.rgb_min, cfg.rgb_max, size=3, endpoint=True)
        imu = self._rng.uniform(cfg.imu_min_rotation, cfg.imu_max_rotation, size=3)

        return TimestampData(
            timestamp=timestamp,
            lidar_readings=tuple(float(r) for r in lidar),
            camera_readings=(int(rgb[0]), int(rgb[1]), int(rgb[2])),
            imu_readings=(float(imu[0]), float(imu[1]), float(imu[2])),
        )


if __name__ == "__main__":
    print("=== Test SensorDataGenerator ===\n")

    generator = SensorDataGenerator()
    print(f"Graine: {generator.seed}")
    for sample in generator.generate():
        print(f"t={sample.timestamp}: "
              f"LIDAR min {min(sample.lidar_readings):.2f}m, "
              f"RGB{sample.camera_readings}, "
              f"RPY({', '.join(f'{a:.1f}' for a in sample.imu_readings)})")
