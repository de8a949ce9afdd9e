"""
Dependency Age Tool

Report how long ago the installed version of each npm dependency was released.
"""

__version__ = "0.1.0"

from .cli import main

__all__ = ["main"]
