"""Drives a particle system by activating particles step by step."""

from __future__ import annotations

import threading
import time
from pathlib import Path
from typing import Any, Callable

from amoebot.node import Node
from amoebot.system import System

DEFAULT_STEP_MS = 100


class Signal:
    """A list of callbacks invoked together."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> None:
        self._handlers.append(handler)

    def emit(self, *args: Any) -> None:
        for handler in list(self._handlers):
            handler(*args)


class Simulator:
    """Runs activations of a system, optionally on a background timer."""

    def __init__(self) -> None:
        self._system: System | None = None
        self._step_ms = DEFAULT_STEP_MS
        self._thread: threading.Thread | None = None
        self._halt = threading.Event()

        self.system_changed = Signal()
        self.step_duration_changed = Signal()
        self.started = Signal()
        self.stopped = Signal()

    def _require_system(self) -> System:
        if self._system is None:
            raise RuntimeError("no system has been set")
        return self._system

    def set_system(self, system: System) -> None:
        """Stop running and replace the simulated system."""
        self._halt_timer()
        self.stopped.emit()
        self._system = system
        self.system_changed.emit(system)

    def get_system(self) -> System | None:
        return self._system

    def _run(self, halt: threading.Event) -> None:
        while not halt.wait(self._step_ms / 1000.0):
            self.step()

    def _halt_timer(self) -> None:
        self._halt.set()
        thread = self._thread
        self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def start(self) -> None:
        """Start stepping repeatedly in the background."""
        self._require_system()
        self._halt_timer()
        self._halt = threading.Event()
        self._thread = threading.Thread(target=self._run, args=(self._halt,), daemon=True)
        self._thread.start()
        self.started.emit()

    def stop(self) -> None:
        self._halt_timer()
        self.stopped.emit()

    def is_running(self) -> bool:
        return self._thread is not None

    def step(self) -> None:
        """Activate one particle; stop once the system has terminated."""
        system = self._require_system()
        with system.mutex:
            system.activate()
            terminated = system.has_terminated()
        if terminated:
            self.stop()

    def step_for_particle_at(self, node: Node) -> None:
        system = self._require_system()
        with system.mutex:
            system.activate_particle_at(node)

    def set_step_duration(self, ms: int) -> None:
        """Set the delay in milliseconds between background activations."""
        if ms < 0:
            raise ValueError("step duration must be non-negative")
        self._step_ms = ms
        self.step_duration_changed.emit(ms)

    @property
    def step_duration(self) -> int:
        return self._step_ms

    def run_until_termination(self) -> None:
        system = self._require_system()
        with system.mutex:
            while not system.has_terminated():
                system.activate()

    def num_particles(self) -> int:
        system = self._require_system()
        with system.mutex:
            return len(system)

    def num_objects(self) -> int:
        system = self._require_system()
        with system.mutex:
            return system.num_objects()

    def metrics(self) -> list[tuple[str, float]]:
        """Current count values and latest measure values, by name."""
        system = self._require_system()
        with system.mutex:
            data: list[tuple[str, float]] = [
                (c.name, c.value) for c in system.get_counts()
            ]
            data.extend(
                (m.name, m.history[-1] if m.history else 0.0)
                for m in system.get_measures()
            )
            return data

    def export_metrics(self, directory: str | Path | None = None) -> Path:
        """Write the metrics JSON to a timestamped file under `directory`/metrics."""
        system = self._require_system()
        base = Path(directory) if directory is not None else Path.cwd()
        metrics_dir = base / "metrics"
        metrics_dir.mkdir(parents=True, exist_ok=True)
        out = metrics_dir / f"metrics_{int(time.time())}.json"
        with system.mutex:
            text = system.metrics_as_json()
        out.write_text(text, encoding="utf-8")
        return out