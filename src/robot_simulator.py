#!/usr/bin/env python3
"""
Robot Simulator - menu console

Maintient la pose 2D d'un robot (x, y, cap en degres) sous les commandes
de l'utilisateur:

  1. Avancer          5. Quitter
  2. Tourner a gauche 6. Reculer
  3. Tourner a droite 7. Reinitialiser la pose
  4. Etat du robot

La pose n'est modifiee que par le noyau core.pose. Une saisie invalide
affiche un diagnostic et laisse la pose inchangee.

Usage:
    python src/robot_simulator.py
"""

import argparse
import sys
from enum import IntEnum
from typing import Callable, Dict, Optional, Tuple

from core.pose import (
    Pose2D, move_forward, move_backward, turn_left, turn_right,
    reset_pose, pose_status,
)
from interface.console_interface import ConsoleIO

INVALID_INPUT = "Invalid input. Please enter a valid number."
INVALID_CHOICE = "Invalid choice. Please enter a number between 1 and 7"
INVALID_DISTANCE = "Invalid distance. Please enter a positive number."
INVALID_ANGLE = "Angle must be > 0."

EXIT_OK = 0
EXIT_END_OF_INPUT = 1
EXIT_INTERRUPTED = 130


class MenuOption(IntEnum):
    """Options du menu principal."""
    MOVE_FORWARD = 1
    TURN_LEFT = 2
    TURN_RIGHT = 3
    STATUS = 4
    EXIT = 5
    MOVE_BACKWARD = 6
    RESET = 7


MENU = (
    "\n--- Robot Menu ---\n"
    " 1. Move Forward\n"
    " 2. Turn Left\n"
    " 3. Turn Right\n"
    " 4. Get Robot Status\n"
    " 5. Exit\n"
    " 6. Backward\n"
    " 7. Reset Pose"
)

# Option -> (invite, diagnostic si <= 0)
MAGNITUDE_PROMPTS: Dict[MenuOption, Tuple[str, str]] = {
    MenuOption.MOVE_FORWARD: ("Enter distance to move forward (e.g., 5.5):", INVALID_DISTANCE),
    MenuOption.TURN_LEFT: ("Enter angle to turn left in degrees (e.g., 45.0): ", INVALID_ANGLE),
    MenuOption.TURN_RIGHT: ("Enter angle to turn right in degrees (e.g., 45.0): ", INVALID_ANGLE),
    MenuOption.MOVE_BACKWARD: ("Enter distance to move backward (e.g., 5.5):", INVALID_DISTANCE),
}


class RobotSimulator:
    """
    Boucle lecture-evaluation-affichage du simulateur de pose.

    Usage:
        simulator = RobotSimulator()
        exit_code = simulator.run()

        # Avec des flux de test
        console = ConsoleIO(io.StringIO("1\\n10\\n5\\n"), io.StringIO())
        RobotSimulator(console).run()
    """

    def __init__(self, console: Optional[ConsoleIO] = None):
        """
        Args:
            console: Entree/sortie texte (terminal par defaut)
        """
        self.console = console or ConsoleIO()
        self.pose = reset_pose()

        self._handlers: Dict[MenuOption, Callable[[float], None]] = {
            MenuOption.MOVE_FORWARD: self._move_forward,
            MenuOption.TURN_LEFT: self._turn_left,
            MenuOption.TURN_RIGHT: self._turn_right,
            MenuOption.MOVE_BACKWARD: self._move_backward,
        }

    def run(self) -> int:
        """
        Execute la boucle jusqu'a la commande Exit.

        Returns:
            Code de sortie (0 apres Exit)

        Raises:
            EOFError: Fin de l'entree pendant une lecture
        """
        self.console.print("Welcome to the Robot Simulator")
        while True:
            if not self.step():
                return EXIT_OK

    def step(self) -> bool:
        """
        Une iteration: menu, choix, commande.

        Returns:
            False si l'utilisateur a choisi Exit
        """
        self.console.print(MENU)
        self.console.prompt("Enter your choice: ")

        choice = self.console.read_int()
        if choice is None:
            self.console.print(INVALID_INPUT)
            return True
        if choice < MenuOption.MOVE_FORWARD or choice > MenuOption.RESET:
            self.console.print(INVALID_CHOICE)
            return True

        option = MenuOption(choice)

        if option == MenuOption.EXIT:
            self.console.print("Exiting Robot Simulator. Goodbye!")
            return False
        if option == MenuOption.STATUS:
            self._print_status()
            return True
        if option == MenuOption.RESET:
            self.pose = reset_pose()
            self.console.print("Robot pose has been reset to the origin with 0 degrees orientation.")
            return True

        magnitude = self._read_magnitude(option)
        if magnitude is not None:
            self._handlers[option](magnitude)
        return True

    def _read_magnitude(self, option: MenuOption) -> Optional[float]:
        """Lit une distance ou un angle strictement positif. None si refuse."""
        prompt, non_positive_message = MAGNITUDE_PROMPTS[option]
        self.console.prompt(prompt)

        value = self.console.read_float()
        if value is None:
            self.console.print(INVALID_INPUT)
            return None
        if value <= 0.0:
            self.console.print(non_positive_message)
            return None
        return value

    # -- Commandes ------------------------------------------------------------

    def _move_forward(self, distance: float):
        self.pose = move_forward(self.pose, distance)
        self._print_move(distance, "forward")

    def _move_backward(self, distance: float):
        self.pose = move_backward(self.pose, distance)
        self._print_move(distance, "backward")

    def _turn_left(self, angle: float):
        self.pose = turn_left(self.pose, angle)
        self._print_turn(angle, "left")

    def _turn_right(self, angle: float):
        self.pose = turn_right(self.pose, angle)
        self._print_turn(angle, "right")

    # -- Affichage ------------------------------------------------------------

    def _print_move(self, distance: float, direction: str):
        x, y = self.pose.position
        self.console.print(f"Robot moved {distance:.2f} meters {direction}. "
                           f"New position: ({x:.2f}, {y:.2f})")

    def _print_turn(self, angle: float, direction: str):
        self.console.print(f"Robot turned {direction} by {angle:.2f} degrees. "
                           f"New orientation: {self.pose.theta_deg:.2f} degrees")

    def _print_status(self):
        x, y, theta = pose_status(self.pose)
        self.console.print("Robot Status:")
        self.console.print(f" Position: ({x:.2f}, {y:.2f})")
        self.console.print(f" Orientation: {theta:.2f} degrees")


def run_robot_simulator(console: Optional[ConsoleIO] = None) -> int:
    """
    Lance le simulateur et traduit les fins anormales en code de sortie.

    Returns:
        0 apres Exit, 1 si l'entree se termine, 130 sur Ctrl+C
    """
    simulator = RobotSimulator(console)
    try:
        return simulator.run()
    except EOFError:
        simulator.console.print("\n[STOP] End of input")
        return EXIT_END_OF_INPUT
    except KeyboardInterrupt:
        simulator.console.print("\n[STOP] Interrupted by user")
        return EXIT_INTERRUPTED


def main():
    parser = argparse.ArgumentParser(
        description='Robot Simulator - menu console de pose 2D'
    )
    parser.parse_args()
    return run_robot_simulator()


if __name__ == '__main__':
    sys.exit(main())
