import pytest

pytest.importorskip("glfw")
pytest.importorskip("OpenGL.GL")

import main
from ball import COLOR
from events import KEY_ESCAPE, KeyDown, MouseMotion, Quit
from simulation import Simulation


class FakeWindow:
    """Devuelve lotes de eventos preparados y anota cada llamada"""

    def __init__(self, batches, calls):
        self.batches = list(batches)
        self.calls = calls
        self.presented = 0

    def poll_events(self):
        self.calls.append("poll")
        return self.batches.pop(0) if self.batches else [Quit()]

    def present(self):
        self.calls.append("present")
        self.presented += 1


class FakeRenderer:
    def __init__(self, calls):
        self.calls = calls
        self.colors = []
        self.drawn = []

    def clear(self):
        self.calls.append("clear")

    def set_draw_color(self, color):
        self.calls.append("color")
        self.colors.append(color)

    def draw_points(self, points, projection, view):
        self.calls.append("draw")
        self.drawn.append(points)


@pytest.fixture
def clock(monkeypatch):
    times = iter([0.1, 0.2, 0.3, 0.4])
    sleeps = []
    monkeypatch.setattr(main.glfw, "get_time", lambda: next(times))
    monkeypatch.setattr(main.time, "sleep", sleeps.append)
    return sleeps


def make_simulator(batches, calls):
    simulator = main.BallSimulator()
    simulator.window = FakeWindow(batches, calls)
    simulator.renderer = FakeRenderer(calls)
    simulator.simulation = Simulation(800, 600, now=0.0)
    return simulator


@pytest.mark.parametrize("event", [Quit(), KeyDown(KEY_ESCAPE)])
def test_quit_batch_renders_nothing(clock, event):
    calls = []
    simulator = make_simulator([[event]], calls)

    simulator.run()

    assert calls == ["poll"]
    assert simulator.window.presented == 0
    assert clock == []
    assert tuple(simulator.simulation.ball.position) == (400.0, 300.0)


def test_one_tick_order(clock):
    calls = []
    simulator = make_simulator([[]], calls)

    simulator.run()

    assert calls == ["poll", "clear", "color", "draw", "present", "poll"]
    assert simulator.renderer.colors == [COLOR]
    assert clock == [main.FRAME_INTERVAL]

    # La física avanzó hasta el tiempo leído en el tick
    assert simulator.simulation.last_update == 0.1
    assert simulator.simulation.ball.velocity[1] > 0


def test_drag_then_quit(clock):
    calls = []
    simulator = make_simulator([[MouseMotion(400, 300, True), MouseMotion(500, 200, True)]], calls)

    simulator.run()

    ball = simulator.simulation.ball
    assert ball.dragged
    assert tuple(ball.position) == (500.0, 200.0)
    assert len(simulator.renderer.drawn) == 1
    assert simulator.renderer.drawn[0][:, 0].max() == 500 + 25
