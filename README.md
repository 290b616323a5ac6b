# simplecollision

A small two-dimensional simulation of balls bouncing around a box.
Every ball has the same radius (15) and unit mass. Balls bounce off the
walls and push each other apart when they overlap, exchanging velocity
along the line between their centres.

## Running

The window is built with `tkinter` from the standard library (some Linux
distributions ship it as a separate system package). After installing,
start it with:

    simplecollision

The window (800 x 600, titled "simple collision") shows the simulation
area on the left and a column of controls on the right:

- **Start simulation** – starts the animation timer.
- **Pause simulation** – stops it.
- **Generate random** – pauses, clears the area and places ten balls at
  random positions with random velocities in [-1, 1] on each axis.
- **Show velocity** – draws a red arrow on each moving ball showing its
  velocity.

The total kinetic energy of all balls, to three decimal places, is shown
in the top-left corner. The area starts empty; press **Generate random**
first. The command takes no options besides `--help`.

## Using it as a library

The physics does not depend on the window and can be driven directly:

```python
from simplecollision.simulation import Simulation

sim = Simulation(800, 600)
sim.generate_random(10)
for _ in range(1000):
    sim.step()
print(sim.energy_text())
```

- `simplecollision.ball` – `Vec` (an immutable 2D vector with `+`, `-`,
  scalar `*`, `dot()`, `length()` and `rounded()`), `rotate(point, phi)`,
  `Arrow`, and `Ball` with `move()`, `check_border_collision(width, height)`,
  `check_object_collision(other)`, `speed()`, `kinetic_energy()` and
  `arrow()` (`None` for a ball at rest).
- `simplecollision.simulation` – `Simulation(width, height, rng=None)` holds
  a list of balls and offers `generate_random(n)`, `step()`, `clear()`,
  `resize(width, height)`, `total_energy()` and `energy_text()`.
  `generate_random` raises `ValueError` when the area is too small to fit a
  ball. Pass a `random.Random` as `rng` for reproducible layouts.
- `simplecollision.render` – `render(simulation, surface, draw_arrows)` draws
  a simulation onto any object implementing the `Surface` protocol
  (`clear`, `circle`, `line`, `polygon`, `text`).
- `simplecollision.app` – `Controller` holds the start/pause/reset/arrow
  state independent of any toolkit (`start()`, `stop()`, `reset()`,
  `set_show_arrows(flag)`, `tick()`); `MainFrame` is the Tkinter window and
  `main()` starts it.
- `simplecollision.config` – the constants: frame rate, time step, ball
  radius and count, colours and window size.

## What it does not do

There is no way to place balls by hand, to set their number, size or mass
from the window or command line, or to save and load a simulation state.

## Tests

    pip install -e ".[test]"
    pytest