"""Version information for oauth-identity."""

__version__ = "1.0.0"
