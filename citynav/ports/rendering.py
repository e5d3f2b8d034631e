"""Rendering port - Abstraction for presenting the network to an operator.

This protocol defines the contract for turning network state and route
outcomes into display text, so the menu loop never formats anything
itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Location, Road, RouteOutcome


class NetworkRendererPort(Protocol):
    """Port for network rendering.

    Implementation: adapters/rendering/terminal_renderer.py
    """

    def clear_screen(self) -> str:
        """Return the control sequence that clears the display, or ''."""
        ...

    def render_header(self) -> str:
        ...

    def render_map(
        self,
        locations: Sequence[Location],
        roads: Sequence[Road],
    ) -> str:
        """Render the adjacency of every location."""
        ...

    def render_status(
        self,
        locations: Sequence[Location],
        roads: Sequence[Road],
    ) -> str:
        """Render a table of every road and its traffic status."""
        ...

    def render_route(
        self,
        outcome: RouteOutcome,
    ) -> str:
        """Render a route query outcome."""
        ...

    def render_progress(self, message: str) -> str:
        ...

    def render_error(self, message: str) -> str:
        ...

    def render_success(self, message: str) -> str:
        ...
