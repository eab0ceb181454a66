"""
Trace des historiques capteurs.

Sauvegarde une image avec trois graphiques empiles (moyenne LIDAR,
luminosite camera, rotation IMU) en fonction du timestamp.
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from perception.sensor_statistics import SensorStatistics, history_range


def plot_histories(stats: SensorStatistics, save_path: str) -> bool:
    """
    Trace les historiques d'un run.

    Args:
        stats: Statistiques du run
        save_path: Chemin de l'image a sauvegarder

    Returns:
        True si l'image a ete sauvegardee, False si le run est vide

    Raises:
        OSError: Chemin non accessible en ecriture
    """
    if not stats.processed_timestamps:
        return False

    timestamps = np.asarray(stats.processed_timestamps)
    series = [
        ("Moyenne LIDAR", "Distance (m)", stats.lidar_average_history, '#1f77b4'),
        ("Luminosite camera", "Luminosite", stats.camera_brightness_history, '#ff7f0e'),
        ("Rotation IMU", "Rotation (deg)", stats.imu_rotation_history, '#2ca02c'),
    ]

    fig, axes = plt.subplots(len(series), 1, figsize=(10, 9), sharex=True)
    try:
        fig.suptitle('Systeme triple capteur - Historiques', fontsize=14, fontweight='bold')

        for ax, (title, ylabel, history, color) in zip(axes, series):
            ax.plot(timestamps, history, marker='o', color=color)
            ax.set_title(title, fontsize=12)
            ax.set_ylabel(ylabel)
            ax.grid(True, alpha=0.3)

            # Extremes (premier min, dernier max)
            extrema = history_range(history, stats.processed_timestamps)
            ax.scatter([extrema.min_timestamp], [extrema.minimum], color='blue', zorder=3,
                       label=f"min {extrema.minimum:.2f}")
            ax.scatter([extrema.max_timestamp], [extrema.maximum], color='red', zorder=3,
                       label=f"max {extrema.maximum:.2f}")
            ax.legend(loc='best')

        axes[-1].set_xlabel('Timestamp')

        fig.tight_layout()
        fig.savefig(save_path, dpi=100)
    finally:
        plt.close(fig)
    return True
