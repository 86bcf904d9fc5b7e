"""vaultviews - tag-driven views over a vault of notes."""

from vaultviews.__version__ import __version__

__all__ = ["__version__"]
