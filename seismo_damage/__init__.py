"""
Seismo Damage — earthquake structural damage estimation for a single building.

Deterministic heuristic model, simplified shear-building displacement
simulator, component damage decomposition, and a mock regression
prediction service with local fallback.
"""

__version__ = "0.1.0"
