import math
import random
import pygame


class SpriteGenerator:
    """Generates procedural sprites without external assets"""
    def __init__(self, seed=1977):
        self.rng = random.Random(seed)
        self.sprites = {}
        self.generate_sprites()

    def generate_paddle(self, color, size=(32, 96)):
        w, h = size
        surf = pygame.Surface(size, pygame.SRCALPHA)
        # Glow halo, fading out towards the edges
        for i in range(6):
            alpha = 40 + i * 30
            inset = i * 2
            pygame.draw.rect(surf, (*color, alpha),
                             (inset, inset, w - 2 * inset, h - 2 * inset),
                             border_radius=w // 2)
        # Bright core
        core = tuple(min(255, c + 120) for c in color)
        pygame.draw.rect(surf, (*core, 255), (w // 2 - 3, 6, 6, h - 12), border_radius=3)
        return surf

    def generate_ball(self, size=32, color=(255, 230, 120)):
        surf = pygame.Surface((size, size), pygame.SRCALPHA)
        center = size // 2
        radius = center
        for r in range(radius, 0, -1):
            t = r / radius
            alpha = int(255 * (1.0 - t) ** 0.5)
            shade = tuple(int(c + (255 - c) * (1.0 - t)) for c in color)
            pygame.draw.circle(surf, (*shade, alpha), (center, center), r)
        return surf

    def generate_starfield(self, size=(512, 288), stars=400):
        w, h = size
        surf = pygame.Surface(size, pygame.SRCALPHA)
        surf.fill((4, 6, 20, 255))

        # Faint nebula band across the middle
        for y in range(h):
            d = abs(y - h / 2) / (h / 2)
            glow = int(30 * math.exp(-4 * d * d))
            pygame.draw.line(surf, (4 + glow, 6, 20 + 2 * glow, 255), (0, y), (w, y))

        for _ in range(stars):
            x = self.rng.randrange(w)
            y = self.rng.randrange(h)
            b = self.rng.randint(120, 255)
            if self.rng.random() < 0.08:
                pygame.draw.circle(surf, (b, b, 255, 255), (x, y), 2)
            else:
                surf.set_at((x, y), (b, b, b, 255))
        return surf

    def generate_sprites(self):
        self.sprites['red_paddle'] = self.generate_paddle((200, 30, 30))
        self.sprites['blue_paddle'] = self.generate_paddle((30, 80, 220))
        self.sprites['ball'] = self.generate_ball()
        self.sprites['background'] = self.generate_starfield()

    def get(self, name):
        return self.sprites[name]
