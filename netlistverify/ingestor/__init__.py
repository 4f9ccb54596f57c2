"""Netlist extraction from Gerber objects and CadStar exports."""
