"""
Phrase Router: offline-first Chinese/Korean phrase matching and translation routing.
"""

__version__ = "1.0.0"
