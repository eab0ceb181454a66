#!/usr/bin/env python3
"""
ROBOT CONSOLE - Simulateurs console
===================================

Point d'entree principal avec deux modes de fonctionnement:

1. MODE ROBOT:
   python main.py --mode robot
   - Menu interactif de pose 2D (avancer, tourner, reculer, reset)

2. MODE CAPTEURS:
   python main.py --mode sensors
   - Generation de mesures LIDAR / Camera / IMU aleatoires
   - Classification par instant et statistiques de fin de run

Usage:
    python main.py --mode robot
    python main.py --mode sensors
    python main.py --mode sensors --seed 42 --timestamps 10
    python main.py --mode sensors --plot historiques.png
"""

import sys
import argparse
from pathlib import Path

# Ajouter src au path
sys.path.insert(0, str(Path(__file__).parent / 'src'))


def run_robot_mode(args):
    """Execute le simulateur de pose."""
    from robot_simulator import run_robot_simulator

    return run_robot_simulator()


def run_sensors_mode(args):
    """Execute le resume triple capteur."""
    from sensor_summary import run_from_args

    return run_from_args(args)


def main():
    parser = argparse.ArgumentParser(
        description='ROBOT CONSOLE - Simulateur de pose et resume capteurs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exemples:
  Mode robot:
    python main.py --mode robot

  Mode capteurs:
    python main.py --mode sensors
    python main.py --mode sensors --seed 42 --timestamps 10
    python main.py --mode sensors --plot historiques.png
"""
    )

    # Mode principal
    parser.add_argument(
        '--mode', '-m',
        choices=['robot', 'sensors'],
        required=True,
        help='Mode: robot (menu de pose) ou sensors (resume capteurs)'
    )

    # Options capteurs
    sensor_group = parser.add_argument_group('Options Capteurs')
    sensor_group.add_argument(
        '--seed',
        type=int,
        help='Graine aleatoire pour rejouer un run (defaut: entropie systeme)'
    )
    sensor_group.add_argument(
        '--timestamps',
        type=int,
        help='Nombre d\'instants generes (defaut: 5)'
    )
    sensor_group.add_argument(
        '--plot',
        type=str,
        help='Sauvegarder les historiques dans une image PNG'
    )

    args = parser.parse_args()

    # Executer le mode choisi
    if args.mode == 'robot':
        return run_robot_mode(args)
    else:
        return run_sensors_mode(args)


if __name__ == '__main__':
    sys.exit(main())
