"""
Configuration
=============
Defaults read by the public entry points when an argument is left as None.

Exports:
    DEFAULT_METHOD (str): Name of the hull computer in ``HULL_METHODS``.
    DEFAULT_TOLERANCE (float): Duplicate-merge tolerance; 0 means exact equality.
    LOGGER_NAME (str): Root logger namespace of the package.
"""

DEFAULT_METHOD: str = "jarvis"
DEFAULT_TOLERANCE: float = 0.0
LOGGER_NAME: str = "giftwrap"
