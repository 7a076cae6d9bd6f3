"""
Single-player snake game engine.
"""

__version__ = "0.1.0"
