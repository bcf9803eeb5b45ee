import json
import threading

import pytest

from amoebot.amoebotparticle import AmoebotParticle
from amoebot.amoebotsystem import AmoebotSystem
from amoebot.metric import Measure
from amoebot.node import Node
from amoebot.objects import SolidObject
from amoebot.simulator import Simulator


class Idle(AmoebotParticle):
    def __init__(self, head, system):
        super().__init__(head, -1, 0, system)
        self.activations = 0

    def activate(self):
        self.activations += 1


class LimitedSystem(AmoebotSystem):
    def __init__(self, limit):
        super().__init__()
        self.limit = limit
        self.insert(Idle(Node(0, 0), self))

    def has_terminated(self):
        return self.get_count("# Activations").value >= self.limit


class ConstMeasure(Measure):
    def calculate(self):
        return 0.5


def test_step_without_system_raises():
    sim = Simulator()
    with pytest.raises(RuntimeError):
        sim.step()


def test_set_system_emits_signals():
    sim = Simulator()
    seen = []
    sim.stopped.connect(lambda: seen.append("stopped"))
    sim.system_changed.connect(lambda s: seen.append(s))
    system = LimitedSystem(3)
    sim.set_system(system)
    assert seen == ["stopped", system]
    assert sim.get_system() is system


def test_step_activates_one_particle():
    sim = Simulator()
    system = LimitedSystem(10)
    sim.set_system(system)
    sim.step()
    sim.step()
    assert system.at(0).activations == 2
    assert sim.num_particles() == 1


def test_step_for_particle_at():
    sim = Simulator()
    system = LimitedSystem(10)
    sim.set_system(system)
    sim.step_for_particle_at(Node(0, 0))
    sim.step_for_particle_at(Node(7, 7))
    assert system.get_count("# Activations").value == 1


def test_run_until_termination():
    sim = Simulator()
    system = LimitedSystem(7)
    sim.set_system(system)
    sim.run_until_termination()
    assert system.get_count("# Activations").value == 7
    assert system.has_terminated()


def test_start_runs_until_terminated():
    sim = Simulator()
    system = LimitedSystem(5)
    sim.set_system(system)
    sim.set_step_duration(0)
    done = threading.Event()
    sim.stopped.connect(done.set)
    sim.start()
    assert done.wait(5.0)
    assert system.get_count("# Activations").value == 5
    assert not sim.is_running()


def test_set_step_duration():
    sim = Simulator()
    seen = []
    sim.step_duration_changed.connect(seen.append)
    sim.set_step_duration(25)
    assert sim.step_duration == 25
    assert seen == [25]
    with pytest.raises(ValueError):
        sim.set_step_duration(-1)


def test_metrics_values():
    sim = Simulator()
    system = LimitedSystem(10)
    measure = ConstMeasure("Half", 1)
    system.add_measure(measure)
    sim.set_system(system)
    before = dict(sim.metrics())
    assert before["Half"] == 0.0
    sim.step()
    after = sim.metrics()
    assert [name for name, _ in after] == ["# Rounds", "# Activations", "# Moves", "Half"]
    assert dict(after)["# Activations"] == 1
    assert dict(after)["Half"] == 0.5


def test_num_objects():
    sim = Simulator()
    system = LimitedSystem(1)
    system.insert_object(SolidObject(Node(3, 3)))
    sim.set_system(system)
    assert sim.num_objects() == 1


def test_export_metrics_writes_json(tmp_path):
    sim = Simulator()
    system = LimitedSystem(10)
    sim.set_system(system)
    sim.step()
    path = sim.export_metrics(tmp_path)
    assert path.parent == tmp_path / "metrics"
    assert path.name.startswith("metrics_") and path.suffix == ".json"
    data = json.loads(path.read_text(encoding="utf-8"))
    counts = {c["name"]: c["history"] for c in data["counts"]}
    assert counts["# Activations"] == [1]