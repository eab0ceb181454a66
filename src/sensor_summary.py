#!/usr/bin/env python3
"""
Triple-Sensor Data Summarizer

Pipeline:
  1. Generation    - toutes les mesures LIDAR / Camera / IMU du run
  2. Classification - caracteristiques et labels par capteur
  3. Agregation    - totaux, moyennes, historiques
  4. Rapport       - resume final (+ trace optionnel)

Usage:
    python src/sensor_summary.py
    python src/sensor_summary.py --seed 42 --timestamps 10
    python src/sensor_summary.py --plot historiques.png
"""

import argparse
import sys
from typing import Optional, TextIO

from core.config import SensorConfig
from interface.sensor_interface import ISensorSource
from perception.sensor_classifier import SensorClassifier
from perception.sensor_statistics import SensorStatistics
from simulation.sensor_simulator import SensorDataGenerator
from visualization.console_report import format_banner, format_sample, format_summary


class SensorSummary:
    """
    Systeme triple capteur: genere, classe, agrege et affiche.

    Usage:
        summary = SensorSummary(SensorConfig(num_timestamps=3), seed=7)
        stats = summary.run()
        print(stats.total_operations)  # 9
    """

    def __init__(self, config: Optional[SensorConfig] = None,
                 seed: Optional[int] = None,
                 source: Optional[ISensorSource] = None,
                 output: Optional[TextIO] = None):
        """
        Args:
            config: Parametres capteurs
            seed: Graine du generateur (ignoree si source est fournie)
            source: Source de mesures (SensorDataGenerator par defaut)
            output: Flux de sortie (sys.stdout par defaut)
        """
        self.config = config or SensorConfig()
        self.source = source or SensorDataGenerator(self.config, seed=seed)
        self.classifier = SensorClassifier(self.config)
        self.stats = SensorStatistics()
        self._out = output if output is not None else sys.stdout

    def _print_lines(self, lines):
        for line in lines:
            self._out.write(line + "\n")

    def run(self) -> SensorStatistics:
        """
        Execute le run complet et affiche le rapport.

        Returns:
            Statistiques du run
        """
        self._print_lines(format_banner(self.config.num_timestamps))

        # Toutes les mesures sont produites avant le traitement
        samples = self.source.generate(self.config.num_timestamps)

        for sample in samples:
            assessment = self.classifier.classify(sample)
            self._print_lines(format_sample(assessment))
            self.stats.update(assessment)

        self._print_lines(format_summary(self.stats))
        return self.stats


def run_sensor_summary(config: Optional[SensorConfig] = None,
                       seed: Optional[int] = None,
                       plot_path: Optional[str] = None,
                       output: Optional[TextIO] = None) -> int:
    """
    Lance le resume capteurs et, si demande, sauvegarde le trace.

    Returns:
        Code de sortie (2 si le trace ne peut pas etre sauvegarde)
    """
    summary = SensorSummary(config, seed=seed, output=output)
    stats = summary.run()

    if plot_path:
        from visualization.history_plot import plot_histories

        out = output if output is not None else sys.stdout
        try:
            saved = plot_histories(stats, plot_path)
        except OSError as e:
            out.write(f"[ERROR] Cannot save plot: {e}\n")
            return 2
        if saved:
            out.write(f"[PLOT] History plot saved to {plot_path}\n")
        else:
            out.write("[PLOT] No samples, nothing to plot\n")
    return 0


def add_sensor_arguments(parser: argparse.ArgumentParser):
    """Options communes du resume capteurs."""
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Graine aleatoire pour rejouer un run (defaut: entropie systeme)'
    )
    parser.add_argument(
        '--timestamps',
        type=int,
        default=None,
        help=f'Nombre d\'instants (defaut: {SensorConfig.num_timestamps})'
    )
    parser.add_argument(
        '--plot',
        type=str,
        default=None,
        help='Sauvegarder les historiques dans une image (ex: historiques.png)'
    )


def config_from_args(args) -> SensorConfig:
    config = SensorConfig()
    if args.timestamps is not None:
        config = config.with_timestamps(args.timestamps)
    return config


def run_from_args(args, output: Optional[TextIO] = None) -> int:
    """
    Valide les options (seed, timestamps, plot) puis lance le run.

    Returns:
        Code de sortie (2 si une option est invalide)
    """
    out = output if output is not None else sys.stdout
    try:
        config = config_from_args(args)
    except ValueError as e:
        out.write(f"[ERROR] {e}\n")
        return 2
    if args.seed is not None and args.seed < 0:
        out.write("[ERROR] seed must be >= 0\n")
        return 2

    return run_sensor_summary(config, seed=args.seed, plot_path=args.plot, output=output)


def main():
    parser = argparse.ArgumentParser(
        description='Triple-Sensor Data Summarizer - LIDAR / Camera / IMU'
    )
    add_sensor_arguments(parser)
    args = parser.parse_args()
    return run_from_args(args)


if __name__ == '__main__':
    sys.exit(main())
