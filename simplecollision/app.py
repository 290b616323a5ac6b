"""Window with start, pause, reset and arrow controls for the simulation."""

from __future__ import annotations

import argparse
from typing import Callable, Sequence

from simplecollision import config
from simplecollision.ball import Vec
from simplecollision.render import Colour, render
from simplecollision.simulation import Simulation


class Controller:
    """State behind the window's controls, independent of any toolkit."""

    def __init__(
        self,
        simulation: Simulation,
        on_refresh: Callable[[], None] | None = None,
    ) -> None:
        self.simulation = simulation
        self.running = False
        self.show_arrows = False
        self._on_refresh = on_refresh

    def _refresh(self) -> None:
        if self._on_refresh is not None:
            self._on_refresh()

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def reset(self) -> None:
        """Pause and replace all balls with a fresh random set."""
        self.stop()
        self.simulation.clear()
        self.simulation.generate_random(config.BALLS_COUNT)
        self._refresh()

    def set_show_arrows(self, flag: bool) -> None:
        self.show_arrows = bool(flag)
        self._refresh()

    def tick(self) -> None:
        """Advance one step if running."""
        if not self.running:
            return
        self.simulation.step()
        self._refresh()


def _hex(colour: Colour) -> str:
    return "#{:02x}{:02x}{:02x}".format(*colour)


class _TkSurface:
    def __init__(self, canvas) -> None:
        self._canvas = canvas

    def clear(self, colour: Colour) -> None:
        self._canvas.delete("all")
        self._canvas.configure(background=_hex(colour))

    def circle(self, centre: Vec, radius: float, colour: Colour) -> None:
        c = _hex(colour)
        self._canvas.create_oval(
            centre.x - radius, centre.y - radius, centre.x + radius, centre.y + radius,
            fill=c, outline=c,
        )

    def line(self, start: Vec, end: Vec, colour: Colour, width: int) -> None:
        self._canvas.create_line(start.x, start.y, end.x, end.y, fill=_hex(colour), width=width)

    def polygon(self, points: Sequence[Vec], colour: Colour) -> None:
        coords = [value for p in points for value in (p.x, p.y)]
        c = _hex(colour)
        self._canvas.create_polygon(*coords, fill=c, outline=c)

    def text(self, text: str, position: Vec, colour: Colour) -> None:
        self._canvas.create_text(position.x, position.y, text=text, anchor="nw", fill=_hex(colour))


class MainFrame:
    """The main window: a drawing area and a column of controls."""

    def __init__(self, title: str = config.WINDOW_TITLE) -> None:
        import tkinter as tk

        self._root = tk.Tk()
        self._root.title(title)
        width, height = config.WINDOW_SIZE
        screen_w = self._root.winfo_screenwidth()
        screen_h = self._root.winfo_screenheight()
        self._root.geometry(
            f"{width}x{height}+{max((screen_w - width) // 2, 0)}+{max((screen_h - height) // 2, 0)}"
        )

        self._canvas = tk.Canvas(
            self._root, background=_hex(config.BACKGROUND_COLOUR), highlightthickness=0
        )
        self._canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        menu = tk.Frame(self._root)
        menu.pack(side=tk.RIGHT, fill=tk.Y)

        self._surface = _TkSurface(self._canvas)
        self.controller = Controller(Simulation(width, height), on_refresh=self._redraw)
        self._interval = int(config.TIME_STEP_MILLIS)
        self._job: str | None = None

        self._arrows = tk.BooleanVar(value=False)
        for label, command in (
            ("Start simulation", self._on_start),
            ("Pause simulation", self._on_stop),
            ("Generate random", self._on_reset),
        ):
            tk.Button(menu, text=label, command=command).pack(padx=5, fill=tk.X)
        tk.Checkbutton(
            menu, text="Show velocity", variable=self._arrows,
            command=lambda: self.controller.set_show_arrows(self._arrows.get()),
        ).pack(padx=5)

        self._canvas.bind("<Configure>", self._on_configure)
        self._root.focus_set()

    def _on_configure(self, event) -> None:
        self.controller.simulation.resize(event.width, event.height)
        self._redraw()

    def _redraw(self) -> None:
        render(self.controller.simulation, self._surface, self.controller.show_arrows)

    def _schedule(self) -> None:
        self._job = self._root.after(self._interval, self._on_timer)

    def _on_timer(self) -> None:
        self._job = None
        self.controller.tick()
        if self.controller.running:
            self._schedule()

    def _cancel(self) -> None:
        if self._job is not None:
            self._root.after_cancel(self._job)
            self._job = None

    def _on_start(self) -> None:
        self.controller.start()
        if self._job is None:
            self._schedule()

    def _on_stop(self) -> None:
        self.controller.stop()
        self._cancel()

    def _on_reset(self) -> None:
        self._cancel()
        self.controller.reset()

    def run(self) -> None:
        self._redraw()
        self._root.mainloop()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate elastic collisions of balls.")
    parser.parse_args(argv)
    MainFrame(config.WINDOW_TITLE).run()
    return 0