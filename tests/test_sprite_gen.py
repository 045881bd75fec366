"""Tests for procedural sprites."""

import pygame
import pytest

from starpong.sprite_gen import SpriteGenerator


@pytest.fixture(scope="module")
def sprites():
    return SpriteGenerator()


class TestSpriteGenerator:

    def test_all_sprites_present(self, sprites):
        for name in ('red_paddle', 'blue_paddle', 'ball', 'background'):
            assert isinstance(sprites.get(name), pygame.Surface)

    def test_unknown_sprite(self, sprites):
        with pytest.raises(KeyError):
            sprites.get('paddle')

    def test_ball_is_round(self, sprites):
        ball = sprites.get('ball')
        w, h = ball.get_size()
        assert w == h
        assert ball.get_at((w // 2, h // 2)).a > 200
        assert ball.get_at((0, 0)).a == 0

    def test_paddle_colors(self, sprites):
        red = sprites.get('red_paddle')
        blue = sprites.get('blue_paddle')
        center = (red.get_width() // 2, red.get_height() // 2)
        r = red.get_at(center)
        b = blue.get_at(center)
        assert r.a == 255 and b.a == 255
        assert r.r > r.b
        assert b.b > b.r

    def test_background_opaque(self, sprites):
        bg = sprites.get('background')
        assert bg.get_at((0, 0)).a == 255

    def test_seeded_background_repeats(self):
        a = SpriteGenerator(seed=7).get('background')
        b = SpriteGenerator(seed=7).get('background')
        assert pygame.image.tostring(a, 'RGBA') == pygame.image.tostring(b, 'RGBA')
