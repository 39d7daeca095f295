# evolve

An artificial-life simulation in which a population of bugs evolves its way
of moving in response to how food is distributed across a small world.

## The world

- The world is a grid of 100 × 100 locations that wraps around at the edges.
- Food (flora) appears at random locations on each simulation step; the number
  of new plants per step is the food growth rate (10 at start, capped at 20).
- An optional "Garden of Eden" (on at start) keeps a 2 × 2 patch in the middle
  of the world stocked with food on every step.
- A blight wipes out all food at once. A reset fills every location with food
  and replaces the population with 10,000 newborn bugs in the centre.

## The bugs

Each bug carries two sets of eight movement genes, one for the X axis and one
for the Y axis. A clock cycles through the eight gene positions; on each step
a bug may, with even odds per axis, move one location in the direction its
current gene dictates. Grazing on food gives 20 energy (at most 60 in all),
every step costs 1 energy, and a bug with at least 30 energy spawns a baby
(costing it 20) that inherits its genes, with a one-in-ten chance of a single
flipped gene. Bugs that run out of energy die.

Bugs are classified by how far their genes make them drift
(`evolve.updaters.fauna.classify`):

- `Species.TWIRLIE` — genes that mostly cancel out, so the bug stays near home;
- `Species.CRUISER` — genes that mostly agree, so the bug travels far;
- `Species.NORMAL` — everything in between.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
evolve [--steps N] [--seed SEED]
```

runs the simulation without a display for `N` steps (20 by default), starting
from a reset, and prints a version line followed by the final status line, for
example:

```
Average Movement Genes X:01101001 Y:11000101 Time:4 Alive:9873
```

`--seed` makes the run repeatable.

## Using the library

Locations on the grid are single indices (`evolve.space`):

```python
from evolve.space import to_index_from_xy, to_x_from_index, to_y_from_index

index = to_index_from_xy(3, 7)
assert to_x_from_index(index) == 3
assert to_y_from_index(index) == 7
```

Classifying a set of genes:

```python
from evolve.models import Species
from evolve.updaters.fauna import classify

assert classify([True] * 8, [True] * 8) is Species.CRUISER
```

The simulation is driven by `evolve.looper.Looper`: call `initialize()` once,
then `update_loop(update_time_millis)` with the current time on every frame.
A simulation step happens whenever the update period (1000 ms at start) has
passed. The world model is `looper.root_model` (`clock`, `fauna`, `flora`,
`overlay`).

```python
import random
from evolve.looper import Looper

looper = Looper(rng=random.Random(1))
looper.initialize()
for step in range(11):
    looper.update_loop(step * 1000.0)
print(looper.root_model.overlay.status_string)
```

User controls live in `looper.root_component` and in
`evolve.components.controls`: `BlightComponent` and `ResetComponent` take
`click()`, `FloraComponent` and `SpeedComponent` take `change(value)` with a
whole number, `GardenComponent`, `PauseComponent`, `FrameRateComponent` and
`TimeComponent` take `change(checked)`. The canvas in
`evolve.components.root.CanvasComponent` takes `mouse_down(x, y)` and requests
a new bug at that spot. Controls accept events only after `initialize()`, and
each frame handles one pending event per control. `make_html()` on each
control, and on `RootComponent`, returns its markup.

The painters in `evolve.painters` draw background, food, bugs and overlay text
onto any drawing context passed as `Looper(context=...)`: an object with
`fill_style` and `font` attributes and `fill_rect(x, y, width, height)` and
`fill_text(text, x, y)` methods.

## What this package does not do

It has no window, web page or event loop of its own. The markup from
`make_html()` is only returned as text, the controls receive events only
through their Python methods, and nothing is drawn unless you supply a drawing
context. The `evolve` command runs without any display.