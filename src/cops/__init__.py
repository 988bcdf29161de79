"""Cops: individual lint rules over Ruby syntax trees."""

from cops.align_parameters import COP_NAME, MSG, AlignParameters, check_call
from cops.models import FileOffense, Offense

__all__ = [
    "COP_NAME",
    "MSG",
    "AlignParameters",
    "FileOffense",
    "Offense",
    "check_call",
]
