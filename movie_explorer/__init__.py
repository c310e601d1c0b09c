"""Movie Explorer - OMDb search and favorites browser"""

__version__ = "1.0.0"
