"""Qt widgets for the virtual stick."""

from .stick_widget import StickWidget

__all__ = ['StickWidget']
