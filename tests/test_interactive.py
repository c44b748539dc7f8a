"""
Test suite for the interactive viewer, run with the SDL dummy driver.
"""

import json

import pygame
import pytest

from predprey.core.config import SwarmConfig
from predprey.simulation.interactive import Camera, Simulation, velocity_color


class TestVelocityColor:

    def test_still_prey_is_grey(self):
        assert velocity_color(pygame.Vector3(0, 0, 0)) == (128, 128, 128)

    def test_axis_colors(self):
        assert velocity_color(pygame.Vector3(5, 0, 0)) == (0, 255, 0)
        assert velocity_color(pygame.Vector3(0, -5, 0)) == (0, 0, 255)
        assert velocity_color(pygame.Vector3(0, 0, 5)) == (255, 0, 0)


class TestCamera:

    def test_looks_at_cube_centre(self):
        config = SwarmConfig()
        camera = Camera(config)
        pos, scale = camera.project(pygame.Vector3(500, 500, 500))
        assert abs(pos[0] - config.screenWidth / 2) <= 1
        assert abs(pos[1] - config.screenHeight / 2) <= 1
        assert scale > 0

    def test_point_behind_camera(self):
        camera = Camera(SwarmConfig())
        behind = camera.position - camera.forward * 10
        assert camera.project(behind) == (None, 0)

    def test_rotate_clamps_pitch(self):
        camera = Camera(SwarmConfig())
        for _ in range(200):
            camera.rotate(0, 1)
        assert camera.pitch < 1.5708


class TestSimulation:

    @pytest.fixture
    def sim(self, tmp_path):
        config = SwarmConfig(preyRows=3, preyCols=3, predCount=1,
                             screenWidth=320, screenHeight=240,
                             statsOutputFile=str(tmp_path / "stats.json"))
        sim = Simulation(config)
        yield sim
        pygame.quit()

    def test_grid_keys(self, sim):
        sim._handle_keydown(pygame.K_r)
        assert sim.config.preyRows == 4
        sim._handle_keydown(pygame.K_r, pygame.KMOD_LSHIFT)
        sim._handle_keydown(pygame.K_r, pygame.KMOD_LSHIFT)
        assert sim.config.preyRows == 2

        sim._handle_keydown(pygame.K_c)
        assert sim.config.preyCols == 4
        assert sim.swarm.prey_count() == 8

    def test_predator_keys(self, sim):
        sim._handle_keydown(pygame.K_p)
        assert len(sim.swarm.predators) == 2
        sim._handle_keydown(pygame.K_p, pygame.KMOD_RSHIFT)
        sim._handle_keydown(pygame.K_p, pygame.KMOD_RSHIFT)
        sim._handle_keydown(pygame.K_p, pygame.KMOD_RSHIFT)
        assert sim.swarm.predators == []

    def test_fear_radius_keys(self, sim):
        radius = sim.config.fearRadius
        sim._handle_keydown(pygame.K_RIGHTBRACKET)
        assert sim.config.fearRadius == radius + 5.0
        sim._handle_keydown(pygame.K_LEFTBRACKET)
        assert sim.config.fearRadius == radius

    def test_escape_stops(self, sim):
        sim._handle_keydown(pygame.K_ESCAPE)
        assert not sim.running

    def test_update_and_draw(self, sim):
        sim.update(0.016)
        sim.draw()
        assert sim.swarm.frame_count == 1

    def test_save_stats(self, sim):
        sim._handle_keydown(pygame.K_SPACE)
        with open(sim.config.statsOutputFile) as f:
            data = json.load(f)
        assert data["prey_count"] == 9
        assert data["config"]["preyRows"] == 3
