"""Weather lookup widget: provider client, view rendering and widget server."""

__version__ = "0.1.0"
