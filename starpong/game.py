"""
Star Pong
=========
Two paddles, up to three balls, one star field.

Controls:
    Red paddle (left):   W / S
    Blue paddle (right): Up / Down
    T: Toggle single-player (blue paddle on autopilot)
    P: Reset
    1 / 2 / 3: Number of balls
    Esc: Quit
"""

import pygame
from pygame.locals import *

from starpong import physics
from starpong.config import KEY_QUIT, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from starpong.controls import apply_key, read_controls
from starpong.render import Renderer
from starpong.scene import draw_list


class Game:
    def __init__(self, variant="pong", asset_dir=None, ball_count=1, single_player=False,
                 w=WINDOW_WIDTH, h=WINDOW_HEIGHT):
        pygame.init()
        pygame.display.set_mode((w, h), DOUBLEBUF | OPENGL)
        pygame.display.set_caption(WINDOW_TITLE)
        self.width, self.height = w, h

        self.renderer = Renderer(w, h)
        self.renderer.load(asset_dir)

        self.state = physics.initial_state(
            spin=(variant == "spin"), ball_count=ball_count, autonomous=single_player)

        self.clock = pygame.time.Clock()
        self.running = True

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == QUIT:
                self.running = False
            elif event.type == KEYDOWN:
                if event.key == KEY_QUIT:
                    self.running = False
                else:
                    self.state = apply_key(self.state, event.key)

    def update(self, dt):
        controls = read_controls(pygame.key.get_pressed())
        self.state = physics.step(self.state, controls, dt)

    def render(self):
        self.renderer.draw(draw_list(self.state))
        pygame.display.flip()

    def run(self):
        try:
            while self.running:
                # No frame cap: dt is whatever time passed since the last frame
                dt = self.clock.tick() / 1000.0
                self.handle_events()
                self.update(dt)
                self.render()
        finally:
            pygame.quit()
