"""
sd - Turn a directory of scripts into a command line.
"""

__version__ = "0.1.0"
