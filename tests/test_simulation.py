import random

import pytest

from simplecollision import config
from simplecollision.ball import Ball, Vec
from simplecollision.simulation import Simulation


def make(width=800, height=600):
    return Simulation(width, height, rng=random.Random(1234))


def test_generate_random_count_and_bounds():
    sim = make()
    sim.generate_random(50)
    assert len(sim.balls) == 50
    r = config.BALL_RADIUS
    for ball in sim.balls:
        assert r <= ball.position.x < sim.width - r
        assert r <= ball.position.y < sim.height - r
        assert -1.0 <= ball.velocity.x <= 1.0
        assert -1.0 <= ball.velocity.y <= 1.0


def test_generate_random_appends():
    sim = make()
    sim.generate_random(3)
    sim.generate_random(4)
    assert len(sim.balls) == 7


def test_generate_random_too_small_raises():
    sim = make(20, 20)
    with pytest.raises(ValueError):
        sim.generate_random(1)


def test_clear():
    sim = make()
    sim.generate_random(5)
    sim.clear()
    assert sim.balls == []
    assert sim.total_energy() == 0.0


def test_total_energy_sums_balls():
    sim = make()
    sim.balls = [Ball(Vec(100, 100), Vec(3.0, 4.0)), Ball(Vec(300, 300), Vec(0.0, 1.0))]
    assert sim.total_energy() == pytest.approx(13.0)


def test_energy_text_format():
    sim = make()
    sim.balls = [Ball(Vec(100, 100), Vec(3.0, 4.0))]
    assert sim.energy_text() == "Total kinetic energy: 12.500"


def test_energy_text_empty():
    assert make().energy_text().startswith("Total kinetic energy: 0.")


def test_step_collision_conserves_momentum_and_energy():
    sim = make()
    sim.balls = [
        Ball(Vec(400.0, 300.0), Vec(0.5, 0.1)),
        Ball(Vec(420.0, 305.0), Vec(-0.4, 0.0)),
    ]
    energy = sim.total_energy()
    px = sum(b.velocity.x for b in sim.balls)
    py = sum(b.velocity.y for b in sim.balls)
    sim.step()
    assert sim.total_energy() == pytest.approx(energy)
    assert sum(b.velocity.x for b in sim.balls) == pytest.approx(px)
    assert sum(b.velocity.y for b in sim.balls) == pytest.approx(py)


def test_step_keeps_balls_inside_after_many_steps():
    sim = make()
    sim.generate_random(config.BALLS_COUNT)
    for _ in range(500):
        sim.step()
    for ball in sim.balls:
        assert -50 < ball.position.x < sim.width + 50
        assert -50 < ball.position.y < sim.height + 50


def test_resize_changes_border():
    sim = make()
    sim.balls = [Ball(Vec(390.0, 100.0), Vec(1.0, 0.0))]
    sim.resize(400, 600)
    sim.step()
    assert sim.balls[0].velocity.x == -1.0
    assert (sim.width, sim.height) == (400, 600)