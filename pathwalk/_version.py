"""Version information for pathwalk."""

__version__ = "0.1.0"
