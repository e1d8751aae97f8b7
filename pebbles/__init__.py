"""
Pebbles - Subtraction Game Engine

A human plays a computer opponent: players alternately remove between
1 and a fixed cap of pebbles from a shared pile, and whoever takes the
last pebble wins. The engine provides:
- State management
- Turn validation and win detection
- Easy (random) and Hard (optimal) computer policies
- A message service and a command-line front end
"""

__version__ = "0.1.0"
