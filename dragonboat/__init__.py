"""
dragonboat - Dragon boat lineup core

Seat layout generation, balance metrics and lineup assignment state.
"""

__version__ = "0.1.0"
