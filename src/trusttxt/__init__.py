"""trusttxt - trust.txt declaration validator."""

__version__ = "1.4.0"
