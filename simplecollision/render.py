"""Drawing a simulation onto an abstract surface."""

from __future__ import annotations

from typing import Protocol, Sequence

from simplecollision import config
from simplecollision.ball import Vec
from simplecollision.simulation import Simulation

Colour = tuple[int, int, int]


class Surface(Protocol):
    """Something that can draw the primitives a simulation needs."""

    def clear(self, colour: Colour) -> None: ...

    def circle(self, centre: Vec, radius: float, colour: Colour) -> None: ...

    def line(self, start: Vec, end: Vec, colour: Colour, width: int) -> None: ...

    def polygon(self, points: Sequence[Vec], colour: Colour) -> None: ...

    def text(self, text: str, position: Vec, colour: Colour) -> None: ...


def render(simulation: Simulation, surface: Surface, draw_arrows: bool) -> None:
    """Draw every ball, optional velocity arrows and the energy readout."""
    surface.clear(config.BACKGROUND_COLOUR)
    for ball in simulation.balls:
        surface.circle(ball.position, ball.radius, ball.colour)
        if draw_arrows and (arrow := ball.arrow()) is not None:
            surface.line(arrow.start, arrow.end, config.ARROW_COLOUR, config.ARROW_WIDTH)
            surface.polygon(arrow.head, config.ARROW_COLOUR)
    surface.text(simulation.energy_text(), Vec(*config.TEXT_POSITION), config.TEXT_COLOUR)