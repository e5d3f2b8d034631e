"""Rendering adapters - Implementations of the NetworkRendererPort."""

from .terminal_renderer import TerminalNetworkRenderer

__all__ = ["TerminalNetworkRenderer"]
