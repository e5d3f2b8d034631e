"""Interactive terminal front-end for the city navigator.

The menu loop only reads operator input, calls NavigationService and
prints what the renderer produces. Errors raised by the service are
shown to the operator and the loop carries on.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from .config import AppConfig, ObservabilityConfig, get_config
from .container import Container
from .domain.errors import NavigationError
from .domain.models import TrafficStatus
from .ports.rendering import NetworkRendererPort
from .services import NavigationService

logger = logging.getLogger(__name__)

MENU = """
1. VIEW Detailed Network Status
2. FIND Shortest Path (Navigation)
3. UPDATE Traffic Intensity (Dynamic)
4. ADD Location
5. ADD Road
6. EXIT
"""

STATUS_PROMPT = "Status (0:Clear, 1:Moderate, 2:Heavy, 3:Blocked): "


class _EndOfInput(Exception):
    """Raised when the input stream is exhausted."""


@dataclass
class NavigatorShell:
    """Menu loop driving a NavigationService.

    Attributes:
        service: The navigation service to drive
        renderer: Produces the text shown to the operator
        input_fn: Reads one line of operator input, defaults to input()
        output_fn: Writes one block of text
        pause_seconds: Delay after each action, 0 to disable
        sleep_fn: Used for the pause
    """

    service: NavigationService
    renderer: NetworkRendererPort
    input_fn: Optional[Callable[[str], str]] = None
    output_fn: Callable[[str], None] = print
    pause_seconds: float = 0.0
    sleep_fn: Callable[[float], None] = time.sleep

    _actions: Dict[str, Callable[[], None]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._actions = {
            "1": self.show_status,
            "2": self.find_route,
            "3": self.update_traffic,
            "4": self.add_location,
            "5": self.add_road,
        }

    def run(self) -> None:
        """Run the menu until the operator exits or input ends."""
        while True:
            self._show_home()
            try:
                choice = self._read("\nInput: ")
            except _EndOfInput:
                break

            action = self._actions.get(choice)
            if action is None:
                break

            try:
                action()
            except _EndOfInput:
                break
            except NavigationError as e:
                logger.debug("Operation failed", extra={"error": str(e)})
                self.output_fn(self.renderer.render_error(str(e)))
            except ValueError as e:
                self.output_fn(self.renderer.render_error(f"Invalid input: {e}"))
            self._pause()

    def show_status(self) -> None:
        self.output_fn(
            self.renderer.render_status(
                self.service.list_locations(), self.service.enumerate_edges()
            )
        )

    def find_route(self) -> None:
        source = self._read_int("Starting Location ID: ")
        target = self._read_int("Destination Location ID: ")
        self.output_fn(self.renderer.render_progress("COMPUTING OPTIMAL ROUTE..."))
        outcome = self.service.find_route(source, target)
        self.output_fn(self.renderer.render_route(outcome))

    def update_traffic(self) -> None:
        a = self._read_int("Enter Node A ID: ")
        b = self._read_int("Enter Node B ID: ")
        status = TrafficStatus.from_code(self._read_int(STATUS_PROMPT))
        self.service.update_status(a, b, status)
        self.output_fn(self.renderer.render_success("Traffic Update Broadcasted!"))

    def add_location(self) -> None:
        location_id = self._read_int("New Location ID: ")
        label = self._read("Location Name: ")
        self.service.add_location(location_id, label)
        self.output_fn(self.renderer.render_success(f"Location {label} added."))

    def add_road(self) -> None:
        a = self._read_int("Enter Node A ID: ")
        b = self._read_int("Enter Node B ID: ")
        base_cost = float(self._read("Base Travel Time: "))
        self.service.add_road(a, b, base_cost)
        self.output_fn(self.renderer.render_success("Road added."))

    def _show_home(self) -> None:
        clear = self.renderer.clear_screen()
        if clear:
            self.output_fn(clear)
        self.output_fn(self.renderer.render_header())
        self.output_fn(
            self.renderer.render_map(
                self.service.list_locations(), self.service.enumerate_edges()
            )
        )
        self.output_fn(MENU)

    def _read(self, prompt: str) -> str:
        try:
            read = self.input_fn or input
            return read(prompt).strip()
        except EOFError:
            raise _EndOfInput()

    def _read_int(self, prompt: str) -> int:
        return int(self._read(prompt))

    def _pause(self) -> None:
        if self.pause_seconds > 0:
            self.sleep_fn(self.pause_seconds)


def configure_logging(config: ObservabilityConfig) -> None:
    """Configure root logging from the observability settings."""
    logging.basicConfig(level=config.level.upper(), format=config.format)


def build_shell(config: Optional[AppConfig] = None) -> NavigatorShell:
    """Create a shell wired to the default container bindings."""
    config = config or get_config()
    container = Container.create_default(config)
    return NavigatorShell(
        service=container.resolve(NavigationService),
        renderer=container.resolve(NetworkRendererPort),
        pause_seconds=config.display.pause_seconds,
    )


def main() -> None:
    config = get_config()
    configure_logging(config.observability)
    shell = build_shell(config)
    try:
        shell.run()
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
