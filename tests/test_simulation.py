import pytest

from events import KEY_ESCAPE, KeyDown, MouseButtonUp, MouseMotion, Quit
from simulation import Simulation


@pytest.fixture
def sim():
    return Simulation(800, 600, now=0.0)


def test_ball_starts_centered(sim):
    assert tuple(sim.ball.position) == (400.0, 300.0)
    assert not sim.ball.dragged
    assert sim.running


@pytest.mark.parametrize("event", [Quit(), KeyDown(KEY_ESCAPE)])
def test_quit_events_stop(sim, event):
    sim.handle_events([event])
    assert not sim.running


def test_other_key_ignored(sim):
    sim.handle_events([KeyDown(65)])
    assert sim.running


def test_grab_inside_radius(sim):
    sim.ball.velocity[:] = (30.0, 40.0)

    sim.handle_events([MouseMotion(410, 305, True)])

    assert sim.ball.dragged
    assert tuple(sim.ball.position) == (410.0, 305.0)
    assert tuple(sim.ball.velocity) == (0.0, 0.0)


def test_motion_outside_radius_ignored(sim):
    sim.handle_events([MouseMotion(10, 10, True)])

    assert not sim.ball.dragged
    assert tuple(sim.ball.position) == (400.0, 300.0)


def test_motion_without_button_ignored(sim):
    sim.handle_events([MouseMotion(400, 300, False)])
    assert not sim.ball.dragged


def test_drag_is_sticky(sim):
    sim.handle_events([MouseMotion(400, 300, True)])
    sim.handle_events([MouseMotion(700, 50, True)])

    assert sim.ball.dragged
    assert tuple(sim.ball.position) == (700.0, 50.0)


def test_release_resumes_gravity(sim):
    sim.handle_events([MouseMotion(400, 300, True), MouseButtonUp()])
    assert not sim.ball.dragged

    # Soltar otra vez no cambia nada
    sim.handle_events([MouseButtonUp(1)])
    assert not sim.ball.dragged

    sim.update(0.1)
    assert sim.ball.velocity[1] > 0


def test_events_in_arrival_order(sim):
    sim.handle_events(
        [MouseMotion(400, 300, True), MouseButtonUp(), MouseMotion(600, 100, True)]
    )

    # Tras soltar, el cursor ya está lejos de la pelota
    assert not sim.ball.dragged
    assert tuple(sim.ball.position) == (400.0, 300.0)


def test_update_tracks_timestamp(sim):
    assert sim.update(0.25) == pytest.approx(0.25)
    assert sim.last_update == 0.25
    assert sim.update(0.30) == pytest.approx(0.05)


def test_update_while_dragged_keeps_timestamp(sim):
    sim.handle_events([MouseMotion(400, 300, True)])

    sim.update(1.0)

    assert sim.last_update == 1.0
    assert tuple(sim.ball.position) == (400.0, 300.0)


def test_ball_stays_in_arena(sim):
    now = 0.0
    for _ in range(600):
        now += 1.0 / 60.0
        sim.update(now)
        x, y = sim.ball.position
        r = sim.ball.radius
        assert r <= x <= sim.width - r
        assert r <= y <= sim.height - r


def test_disc_points_truncate(sim):
    sim.ball.position[:] = (100.9, 200.7)

    points = sim.disc_points()

    assert points[:, 0].min() == 100 - 25 + 1
    assert points[:, 0].max() == 100 + 25
    assert points[:, 1].max() == 200 + 25


def test_events_after_quit_ignored(sim):
    sim.handle_events([Quit(), MouseMotion(400, 300, True), MouseMotion(600, 100, True)])

    assert not sim.running
    assert not sim.ball.dragged
    assert tuple(sim.ball.position) == (400.0, 300.0)
