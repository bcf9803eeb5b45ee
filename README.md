# amoebot

A simulation engine for the amoebot model of programmable matter. Particles
live on the triangular lattice. They see their surroundings only through local
port labels, and they move by expanding into a neighbouring node and then
contracting again. The package supplies the model itself:

- lattice nodes;
- particles with local compasses;
- expansion, contraction and handovers;
- tokens and solid objects;
- counts and measures;
- a simulator that activates particles in turn.

## Installation

```
pip install .
```

## Modules

- `amoebot.node`: `Node` is a frozen, ordered lattice position `(x, y)`.
  `Node.node_in_dir(d)` returns the neighbour in global direction `d`: 0 = E,
  1 = NE, 2 = NW, 3 = W, 4 = SW, 5 = SE. Any other direction raises
  `ValueError`.
- `amoebot.objects`: `SolidObject(node)` is one node of a solid object.
  Particles can sense it but cannot enter it.
- `amoebot.particle`: `Particle(head, global_tail_dir)` holds a head node and
  a global tail direction, which is -1 when the particle is contracted. It
  offers `is_contracted()`, `is_expanded()` and `tail()`. It also has cosmetic
  hooks that subclasses may override: `head_mark_color()`,
  `tail_mark_color()`, `border_colors()` (18 entries), `border_point_colors()`
  (6 entries) and `inspection_text()`.
- `amoebot.localparticle`: `LocalParticle(head, global_tail_dir, orientation)`
  adds a local compass and the port-label scheme. A contracted particle has
  labels 0 to 5 and an expanded one has labels 0 to 9. It has methods for:
  - converting between labels and local or global directions;
  - head and tail labels, and contraction labels, both as they are now and
    "after expansion";
  - the neighbouring node reached through a label;
  - converting between the compass of this particle and a neighbour's.

  Invalid labels or directions raise `ValueError`.
- `amoebot.amoebotparticle`: `AmoebotParticle(head, global_tail_dir,
  orientation, system)` is the base class for algorithm particles. Subclasses
  implement `activate()`. The class provides:
  - movement: `can_expand`/`expand`, `can_push`/`push`,
    `contract`/`contract_head`/`contract_tail` and `can_pull`/`pull`;
  - neighbour queries: `nbr_at_label`, `has_nbr_at_label`,
    `has_head_at_label`, `has_tail_at_label`, `has_object_at_label`,
    `has_object_nbr`, `label_of_first_object_nbr` and
    `label_of_first_nbr_with_property`;
  - a token store: `put_token`, `peek_at_token`, `take_token`,
    `count_tokens` and `has_token`.

  Tokens subclass `Token`. `peek_at_token` and `take_token` raise
  `TokenNotFoundError` when no token matches. The `head_mark_dir` and
  `tail_mark_dir` hooks give local marker directions, which are converted to
  global ones for drawing.
- `amoebot.system`: `System` is the abstract base. Iterating over it yields
  its particles, `len()` gives their number, and `num_objects()` gives the
  number of objects. It looks up metrics by name with `get_count` and
  `get_measure`; an unknown name raises `MetricNotFoundError`. It also
  provides `metrics_as_json()`, `has_terminated()` (which returns `False` by
  default) and the static check `System.is_connected(particles)`.
- `amoebot.amoebotsystem`: `AmoebotSystem` holds particles and objects:
  - `insert(particle)`, `insert_object(obj)` and `remove(particle)` manage
    its contents. Inserting onto an occupied node raises `ValueError`.
  - `activate()` activates a random particle and `activate_particle_at(node)`
    activates the particle on that node.
  - It keeps the counts `"# Rounds"`, `"# Activations"` and `"# Moves"`. A
    round ends once every particle has been activated. At that point each
    count's value is appended to its history. Each measure added with
    `add_measure(measure)` is calculated when the round number is a multiple
    of its frequency.
- `amoebot.metric`: `Count(name)` has `record(num_events=1)`.
  `Measure(name, freq)` is abstract; subclasses implement `calculate()`.
- `amoebot.simulator`: `Simulator` manages a system:
  - `set_system(system)` and `get_system()` set and return it.
  - `step()` activates once and stops the simulator when the system has
    terminated. `step_for_particle_at(node)` activates one chosen particle.
  - `run_until_termination()` activates until the system has terminated.
  - `start()` and `stop()` step in a background thread. `set_step_duration(ms)`
    sets the delay between steps; the default is 100 ms.
  - `num_particles()`, `num_objects()` and `metrics()` report on the system.
  - `export_metrics(directory=None)` writes the metrics JSON and returns the
    path of the file it wrote.
  - The signals `system_changed`, `step_duration_changed`, `started` and
    `stopped` take callbacks through `connect`.
- `amoebot.view`: `View` models a zoomable window onto the plane:
  - `left()`, `right()`, `bottom()` and `top()` give its edges.
  - `includes(x, y)` tests whether a point is in view.
  - `set_viewport_size`, `set_focus_pos` and `set_zoom` set its state. The
    zoom is clamped to the range 4 to 128.
  - `modify_focus_pos` and `modify_zoom` respond to mouse input.

  `node_to_world_coord(node)` and `world_coord_to_node(x, y)` convert between
  lattice nodes and plane coordinates.
- `amoebot.rng`: the shared random source. It provides `seed`, `rand_int`,
  `rand_dir`, `rand_float`, `rand_double`, `rand_bool` and `shuffle`.

## Example

```python
from amoebot.node import Node
from amoebot.amoebotparticle import AmoebotParticle
from amoebot.amoebotsystem import AmoebotSystem
from amoebot.simulator import Simulator
from amoebot import rng


class Wanderer(AmoebotParticle):
    def activate(self):
        if self.is_contracted():
            if self.can_expand(0):
                self.expand(0)
        else:
            self.contract_tail()


class WanderSystem(AmoebotSystem):
    def __init__(self):
        super().__init__()
        self.insert(Wanderer(Node(0, 0), -1, 0, self))
        self.insert(Wanderer(Node(5, 0), -1, 3, self))


rng.seed(1)
sim = Simulator()
sim.set_system(WanderSystem())
for _ in range(10):
    sim.step()

print(sim.metrics())
path = sim.export_metrics("out")
print(path)
```

`metrics()` returns a list of `(name, value)` pairs. There is one pair for
each count, giving its current value. There is one pair for each measure,
giving the last value it recorded, or 0.0 if it has recorded none yet.

`export_metrics(directory)` creates a `metrics` subdirectory inside
`directory`, or inside the current working directory if none is given. It
writes `metrics_<unix-seconds>.json` there. The JSON holds:

- a title and a timestamp;
- the history of each count;
- the frequency and history of each measure.

## Randomness

Every random choice goes through `amoebot.rng`, including the choice of which
particle `AmoebotSystem.activate()` activates. Call `amoebot.rng.seed(...)`
first to make a run reproducible.

## What this package does not do

It is a library, not an application. It has no graphical window and draws
nothing: `View` only computes the visible area and converts coordinates. It
has no scripting engine and no command-line program. It ships no ready-made
particle algorithms; you write those by subclassing `AmoebotParticle` and
`AmoebotSystem`.