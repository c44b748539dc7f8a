"""
Interactive swarm viewer with pygame.
"""

import json
import math
import sys
from typing import Optional, Tuple

import pygame

from ..core.config import SwarmConfig
from ..core.swarm import Swarm

# Camera settings
CAMERA_DISTANCE = 1800
FOV = 800


def velocity_color(velocity: pygame.Vector3) -> Tuple[int, int, int]:
    """
    Color a prey by its heading: X is green, Y is blue, Z is red.

    Components are normalised to the largest one to keep colors bright.
    Nearly still prey are grey.

    Args:
        velocity: Prey velocity

    Returns:
        RGB tuple
    """
    speed = velocity.length()
    if speed <= 0.001:
        return (128, 128, 128)

    r = abs(velocity.z) / speed
    g = abs(velocity.x) / speed
    b = abs(velocity.y) / speed
    max_component = max(r, g, b, 0.001)
    return (
        int(255 * r / max_component),
        int(255 * g / max_component),
        int(255 * b / max_component),
    )


class Camera:
    """Perspective camera orbiting the center of the boundary cube."""

    def __init__(self, config: SwarmConfig):
        self.config = config
        half = config.boundarySize / 2
        self.target = pygame.Vector3(half, half, half)
        self.distance = CAMERA_DISTANCE
        self.yaw = math.pi / 4
        self.pitch = 0.6
        self.rotate_speed = 0.05
        self.zoom_speed = 40.0
        self._update_vectors()

    def _update_vectors(self) -> None:
        """Update camera position and basis vectors from yaw and pitch."""
        offset = pygame.Vector3(
            -math.cos(self.pitch) * math.cos(self.yaw),
            math.sin(self.pitch),
            -math.cos(self.pitch) * math.sin(self.yaw),
        ) * self.distance
        self.position = self.target + offset

        self.forward = (self.target - self.position).normalize()
        up_ref = pygame.Vector3(0, 1, 0)
        self.right = self.forward.cross(up_ref).normalize()
        self.up = self.right.cross(self.forward).normalize()

    def rotate(self, yaw_delta: float, pitch_delta: float) -> None:
        """Orbit the camera by yaw and pitch deltas."""
        self.yaw += yaw_delta * self.rotate_speed
        self.pitch += pitch_delta * self.rotate_speed
        # Clamp pitch to avoid gimbal lock
        self.pitch = max(-math.pi / 2 + 0.1, min(math.pi / 2 - 0.1, self.pitch))
        self._update_vectors()

    def zoom(self, direction: int) -> None:
        self.distance = max(100.0, self.distance - direction * self.zoom_speed)
        self._update_vectors()

    def project(self, point: pygame.Vector3):
        """
        Project a 3D point to screen coordinates.

        Args:
            point: World position

        Returns:
            ((x, y), scale), or (None, 0) if the point is behind the camera
        """
        to_point = point - self.position
        x = to_point.dot(self.right)
        y = to_point.dot(self.up)
        z = to_point.dot(self.forward)

        if z <= 1:
            return None, 0

        scale = FOV / z
        screen_x = int(self.config.screenWidth / 2 + x * scale)
        screen_y = int(self.config.screenHeight / 2 - y * scale)
        return (screen_x, screen_y), scale


class Simulation:
    """
    Interactive swarm viewer.

    Keyboard controls resize the prey grid, add or remove predators and
    tune the fear radius while the swarm runs.
    """

    def __init__(self, config: Optional[SwarmConfig] = None):
        """
        Initialize the viewer.

        Args:
            config: Swarm configuration (defaults if None)
        """
        pygame.init()

        self.config = config if config else SwarmConfig()
        self.screen = pygame.display.set_mode((self.config.screenWidth, self.config.screenHeight))
        pygame.display.set_caption("Predator-Prey Swarm")
        self.clock = pygame.time.Clock()

        self.swarm = Swarm(self.config)
        self.camera = Camera(self.config)
        self.running = True

    def update(self, dt: float) -> None:
        """Update simulation state for one frame."""
        self._handle_held_keys()
        self.swarm.step(dt)

    def _handle_held_keys(self) -> None:
        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT]:
            self.camera.rotate(-1, 0)
        if keys[pygame.K_RIGHT]:
            self.camera.rotate(1, 0)
        if keys[pygame.K_UP]:
            self.camera.rotate(0, 1)
        if keys[pygame.K_DOWN]:
            self.camera.rotate(0, -1)
        if keys[pygame.K_w]:
            self.camera.zoom(1)
        if keys[pygame.K_s]:
            self.camera.zoom(-1)

    def draw(self) -> None:
        """Render the current frame."""
        self.screen.fill(self.config.backgroundColor)

        # Painter's algorithm: farthest first
        draw_list = []
        for prey in self.swarm.iter_prey():
            pos_2d, scale = self.camera.project(prey.position)
            if pos_2d:
                dist = (prey.position - self.camera.position).length_squared()
                size = max(1, int(self.config.preySize * scale))
                draw_list.append((dist, pos_2d, size, velocity_color(prey.velocity)))

        for predator in self.swarm.predators:
            pos_2d, scale = self.camera.project(predator.position)
            if pos_2d:
                dist = (predator.position - self.camera.position).length_squared()
                size = max(2, int(self.config.predSize * scale))
                draw_list.append((dist, pos_2d, size, tuple(self.config.predatorColor)))

        draw_list.sort(key=lambda item: item[0], reverse=True)
        for _, pos, size, color in draw_list:
            pygame.draw.circle(self.screen, color, pos, size)

        self._draw_boundary_box()
        self._draw_stats()
        pygame.display.flip()

    def _draw_boundary_box(self) -> None:
        b = self.config.boundarySize
        corners = [
            pygame.Vector3(0, 0, 0), pygame.Vector3(b, 0, 0),
            pygame.Vector3(b, b, 0), pygame.Vector3(0, b, 0),
            pygame.Vector3(0, 0, b), pygame.Vector3(b, 0, b),
            pygame.Vector3(b, b, b), pygame.Vector3(0, b, b),
        ]
        edges = [
            (0, 1), (1, 2), (2, 3), (3, 0),
            (4, 5), (5, 6), (6, 7), (7, 4),
            (0, 4), (1, 5), (2, 6), (3, 7),
        ]
        projected = [self.camera.project(c)[0] for c in corners]
        for a, c in edges:
            if projected[a] and projected[c]:
                pygame.draw.line(self.screen, (80, 80, 80), projected[a], projected[c], 1)

    def _draw_stats(self) -> None:
        """Draw statistics overlay."""
        font = pygame.font.Font(None, 24)
        y_offset = 10

        stats_text = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Prey: {self.swarm.prey_count()} ({self.config.preyRows}x{self.config.preyCols})",
            f"Predators: {len(self.swarm.predators)}",
            f"Kills: {self.swarm.total_kills()}",
            f"Fear radius: {self.config.fearRadius:.1f}",
        ]

        for text in stats_text:
            surface = font.render(text, True, (200, 200, 200))
            self.screen.blit(surface, (10, y_offset))
            y_offset += 25

    def save_stats(self) -> None:
        """Save current swarm statistics to JSON file."""
        fear = [p.fear_magnitude for p in self.swarm.iter_prey()]
        stats_data = {
            "frame_count": self.swarm.frame_count,
            "prey_count": self.swarm.prey_count(),
            "predator_count": len(self.swarm.predators),
            "total_kills": self.swarm.total_kills(),
            "avg_fear": sum(fear) / len(fear) if fear else 0.0,
            "config": self.config.to_dict(),
        }

        try:
            with open(self.config.statsOutputFile, 'w') as f:
                json.dump(stats_data, f, indent=4)
            print(f"Stats saved to {self.config.statsOutputFile}")
        except OSError as e:
            print(f"Error saving stats: {e}")

    def run(self) -> None:
        """Run the viewer main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event.key, event.mod)

            dt = self.clock.tick(self.config.fpsTarget) / 1000.0
            self.update(dt)
            self.draw()

        pygame.quit()
        sys.exit()

    def _handle_keydown(self, key: int, mod: int = 0) -> None:
        """Handle keyboard input."""
        shift = bool(mod & pygame.KMOD_SHIFT)

        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_r:
            if shift:
                self.swarm.remove_prey_row()
            else:
                self.swarm.add_prey_row()
        elif key == pygame.K_c:
            if shift:
                self.swarm.remove_prey_column()
            else:
                self.swarm.add_prey_column()
        elif key == pygame.K_p:
            if shift:
                self.swarm.remove_predator()
            else:
                self.swarm.add_predator()
        elif key == pygame.K_LEFTBRACKET:
            self.config.fearRadius = max(10.0, self.config.fearRadius - 5.0)
            print(f"Fear radius: {self.config.fearRadius:.1f}")
        elif key == pygame.K_RIGHTBRACKET:
            self.config.fearRadius = min(200.0, self.config.fearRadius + 5.0)
            print(f"Fear radius: {self.config.fearRadius:.1f}")
        elif key == pygame.K_SPACE:
            self.save_stats()
