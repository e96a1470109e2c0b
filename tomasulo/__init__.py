"""Cycle-by-cycle simulation of Tomasulo's dynamic scheduling algorithm."""

__version__ = "0.1.0"