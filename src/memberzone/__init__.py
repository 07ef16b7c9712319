"""Members area with signup, login and role administration."""

__version__ = "0.1.0"
