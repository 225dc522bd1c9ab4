"""
Ethica core: domain types shared by the corpus builder and its consumers.
"""

__version__ = "0.1.0"
