"""
Ethics corpus builder: turns the raw English and Latin HTML sources into the
validated JSON corpus consumed by the presentation layer.
"""

__version__ = "0.1.0"
