"""
Object Tasks Package

Small, independent exercises in object construction:
    - Shapes built from plain data (Rectangle, Circle)
    - JSON round-tripping of objects
    - A fluent builder for CSS selector strings

ARCHITECTURAL GUARANTEE:
------------------------
The selector builder keeps no shared state.
Every call chain gets its own Selector.
"""

__version__ = "0.1.0"
