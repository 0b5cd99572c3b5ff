from game.hop.entities import Particle
from game.hop.particles import ACCENT_COLOR, BURST_SIZE, advance_particles, emit_burst


def test_emit_burst_adds_eight_particles(make_rng):
    particles = []
    emit_burst(particles, 50.0, 60.0, ACCENT_COLOR, make_rng([0.0, 0.75]))

    assert len(particles) == BURST_SIZE == 8
    first = particles[0]
    assert (first.x, first.y) == (50.0, 60.0)
    assert first.vx == -2.0
    assert first.vy == 1.0
    assert first.life == 1.0
    assert all(p.color == ACCENT_COLOR for p in particles)


def test_velocities_stay_in_range():
    import random
    particles = []
    emit_burst(particles, 0, 0, "#ffffff", random.Random(7))
    assert all(-2.0 <= p.vx < 2.0 and -2.0 <= p.vy < 2.0 for p in particles)


def test_particles_move_by_their_velocity():
    particles = [Particle(x=10, y=10, vx=1.5, vy=-0.5, color="#fff")]
    advance_particles(particles)
    assert particles[0].x == 11.5
    assert particles[0].y == 9.5
    assert particles[0].life == 0.95


def test_particle_dies_on_twentieth_advance():
    particles = [Particle(x=0, y=0, vx=0, vy=0, color="#fff")]

    for _ in range(19):
        advance_particles(particles)
    assert len(particles) == 1
    assert particles[0].life > 0

    advance_particles(particles)
    assert particles == []


def test_only_expired_particles_are_dropped():
    particles = [
        Particle(x=0, y=0, vx=0, vy=0, color="#fff", life=0.05),
        Particle(x=0, y=0, vx=0, vy=0, color="#000", life=0.5),
    ]
    advance_particles(particles)
    assert [p.color for p in particles] == ["#000"]
