"""
Interface console pour les programmes interactifs.

Lecture ligne par ligne sur un flux d'entree et ecriture sur un flux
de sortie. Les flux sont injectables pour tester sans terminal.

Regles de saisie:
- les lignes vides sont ignorees en attendant une valeur
- une ligne doit contenir exactement un nombre en chiffres ASCII (espaces
  autour toleres)
- une ligne invalide est consommee entierement
"""

import math
import re
import sys
from typing import Optional, TextIO

INT_PATTERN = re.compile(r'[+-]?\d+', re.ASCII)
FLOAT_PATTERN = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)

# Bornes d'un entier 32 bits signe
INT_MIN = -2**31
INT_MAX = 2**31 - 1


def parse_int(text: str) -> Optional[int]:
    """
    Convertit une ligne en entier.

    Returns:
        L'entier, ou None si la ligne n'est pas exactement un entier
    """
    token = text.strip()
    if not INT_PATTERN.fullmatch(token):
        return None
    value = int(token)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_float(text: str) -> Optional[float]:
    """
    Convertit une ligne en reel.

    'inf', 'nan' et les litteraux avec '_' sont refuses.

    Returns:
        Le reel, ou None si la ligne n'est pas exactement un reel fini
    """
    token = text.strip()
    if not FLOAT_PATTERN.fullmatch(token):
        return None
    value = float(token)
    if math.isinf(value):
        return None
    return value


class ConsoleIO:
    """
    Console texte (entree + sortie).

    Usage:
        console = ConsoleIO()
        console.prompt("Enter your choice: ")
        choice = console.read_int()   # None si saisie invalide
    """

    def __init__(self, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None):
        """
        Args:
            stdin: Flux d'entree (sys.stdin par defaut)
            stdout: Flux de sortie (sys.stdout par defaut)
        """
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def write(self, text: str):
        """Ecrit du texte brut."""
        self._out.write(text)

    def print(self, line: str = ""):
        """Ecrit une ligne complete."""
        self._out.write(line + "\n")

    def prompt(self, text: str):
        """Affiche une invite sans retour a la ligne."""
        self._out.write(text)
        self._out.flush()

    def read_line(self) -> str:
        """
        Lit la prochaine ligne non vide.

        Raises:
            EOFError: Fin du flux d'entree
        """
        while True:
            line = self._in.readline()
            if not line:
                raise EOFError("end of input")
            if line.strip():
                return line

    def read_int(self) -> Optional[int]:
        """Lit un entier sur une ligne. None si invalide."""
        return parse_int(self.read_line())

    def read_float(self) -> Optional[float]:
        """Lit un reel sur une ligne. None si invalide."""
        return parse_float(self.read_line())
