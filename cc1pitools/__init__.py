"""Resonance tables, tree branch layouts, HNL decay widths and kinematics, and histogram grid geometry."""

__version__ = "0.1.0"