"""Netlist comparison."""

from .comparator import compare

__all__ = ["compare"]
