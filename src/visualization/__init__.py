"""
Visualisation des resultats capteurs.

Le trace matplotlib (history_plot) est importe a la demande.
"""

from .console_report import (
    format_banner,
    format_sample,
    format_summary,
)

__all__ = [
    'format_banner',
    'format_sample',
    'format_summary',
]
