"""TUI views for the record manager."""

from carbook.tui.views.main_view import MainScreen

__all__ = ["MainScreen"]
