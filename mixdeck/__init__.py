"""
mixdeck - slider-driven audio mixer controller core.
"""

from mixdeck.__version__ import __version__

__all__ = ["__version__"]
