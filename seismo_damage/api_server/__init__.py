"""
API server package — the prediction service consumed by the scientific engine mode.
"""
