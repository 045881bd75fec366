"""
Fixed-pipeline renderer: texture upload and per-frame drawing.

Drawables come from starpong.scene.draw_list, each drawn as one textured quad.
"""

import os

import pygame
from OpenGL.GL import *

from starpong.config import (
    BACKGROUND_SPRITE,
    BALL_SPRITE,
    BG_COLOR,
    BLUE_PADDLE_SPRITE,
    ORTHO_BOUNDS,
    RED_PADDLE_SPRITE,
)
from starpong.scene import model_matrix
from starpong.sprite_gen import SpriteGenerator

# texture key -> file name inside an asset directory
ASSET_FILES = {
    'background': BACKGROUND_SPRITE,
    'red_paddle': RED_PADDLE_SPRITE,
    'blue_paddle': BLUE_PADDLE_SPRITE,
    'ball': BALL_SPRITE,
}


class AssetLoadError(RuntimeError):
    pass


# ============================================================================
# TEXTURES
# ============================================================================

def texture_from_surface(surface):
    width, height = surface.get_size()
    # Flipped so row 0 is the bottom, matching GL texture space
    data = pygame.image.tostring(surface, 'RGBA', True)

    texture_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, texture_id)
    glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, width, height, 0,
                 GL_RGBA, GL_UNSIGNED_BYTE, data)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)
    return texture_id


def load_texture(filepath):
    try:
        image = pygame.image.load(filepath)
    except (pygame.error, FileNotFoundError) as e:
        print(f"Unable to load image. Make sure the path is correct: {filepath}")
        raise AssetLoadError(filepath) from e
    return texture_from_surface(image)


def load_textures(asset_dir=None):
    """Texture ids by key, from image files if asset_dir is given, else generated."""
    if asset_dir is not None:
        return {key: load_texture(os.path.join(asset_dir, name))
                for key, name in ASSET_FILES.items()}
    sprites = SpriteGenerator()
    return {key: texture_from_surface(sprites.get(key)) for key in ASSET_FILES}


# ============================================================================
# RENDERER
# ============================================================================

def draw_unit_quad():
    glBegin(GL_QUADS)
    glTexCoord2f(0, 0); glVertex2f(-0.5, -0.5)
    glTexCoord2f(1, 0); glVertex2f(0.5, -0.5)
    glTexCoord2f(1, 1); glVertex2f(0.5, 0.5)
    glTexCoord2f(0, 1); glVertex2f(-0.5, 0.5)
    glEnd()


class Renderer:
    def __init__(self, width, height):
        self.textures = {}
        self.init_gl(width, height)

    def init_gl(self, width, height):
        glViewport(0, 0, width, height)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(*ORTHO_BOUNDS)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

        glClearColor(*BG_COLOR)
        glEnable(GL_TEXTURE_2D)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glColor4f(1.0, 1.0, 1.0, 1.0)

    def load(self, asset_dir=None):
        self.textures = load_textures(asset_dir)

    def draw(self, drawables):
        glClear(GL_COLOR_BUFFER_BIT)
        for item in drawables:
            glLoadMatrixf(model_matrix(item.position, item.scale, item.angle))
            glBindTexture(GL_TEXTURE_2D, self.textures[item.texture])
            draw_unit_quad()
