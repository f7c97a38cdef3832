"""Diagnostics package.

Optional tooling on top of the core (requires the diagnostics extras:
numpy, matplotlib).
"""

__all__ = ["plot_path"]
