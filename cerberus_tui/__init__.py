"""Full-screen terminal menu with a home page and a settings page."""

__version__ = "0.1.0"