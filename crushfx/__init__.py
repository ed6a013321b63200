"""Bit crusher with LFO-swept resolution, effect parameters, mix levels and state persistence."""

__version__ = "1.0.1"