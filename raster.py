#raster.py

import numpy as np
import pygame
import constants as C
from perlin import noise
import logger as log

def to_pixel(value):
    """Maps a noise value in [-1, 1] to an 8-bit gray level."""
    level = round((0.5 * value + 0.5) * C.PIXEL_MAX)
    return max(0, min(C.PIXEL_MAX, level))

def _check_grid(width, height, cell_size):
    if width <= 0 or height <= 0:
        raise ValueError(f"Raster size must be positive, got {width}x{height}")
    if cell_size <= 0:
        raise ValueError(f"Cell size must be positive, got {cell_size}")

def sample_slice(width, height, cell_size=C.GOLDEN_CELL_SIZE, z=0.0, origin=(0.0, 0.0)):
    """
    Samples an x-y slice of the noise field at depth z.

    Element [py, px] holds noise(origin_x + px / cell_size, origin_y + py / cell_size, z),
    so each lattice cell covers cell_size pixels along each axis.
    """
    _check_grid(width, height, cell_size)
    ox, oy = origin
    values = np.empty((height, width), dtype=np.float64)
    for py in range(height):
        y = oy + py / cell_size
        for px in range(width):
            values[py, px] = noise(ox + px / cell_size, y, z)
    return values

def to_pixels(values):
    """Maps an array of noise values to 8-bit gray levels, like to_pixel."""
    # np.round rounds half to even, as round() does in to_pixel.
    levels = np.round((0.5 * values + 0.5) * C.PIXEL_MAX)
    return np.clip(levels, 0, C.PIXEL_MAX).astype(np.uint8)

def render_slice(width, height, cell_size=C.GOLDEN_CELL_SIZE, z=0.0, origin=(0.0, 0.0)):
    """Renders an x-y slice of the noise field as an 8-bit grayscale raster."""
    return to_pixels(sample_slice(width, height, cell_size, z, origin))

def make_surface(pixels):
    """Builds an RGB pygame Surface from a grayscale raster."""
    rgb = np.stack([pixels, pixels, pixels], axis=-1)
    # surfarray indexes [x, y], rasters index [row, column].
    return pygame.surfarray.make_surface(np.transpose(rgb, (1, 0, 2)))

def save_image(path, pixels):
    """Saves a raster through pygame; the format follows the file extension."""
    pygame.image.save(make_surface(pixels), str(path))
    log.log(f"Saved {pixels.shape[1]}x{pixels.shape[0]} image to {path}.")

def load_image(path):
    """Loads an image through pygame as a grayscale raster (first channel)."""
    surface = pygame.image.load(str(path))
    rgb = pygame.surfarray.array3d(surface)
    return np.ascontiguousarray(np.transpose(rgb[..., 0], (1, 0))).astype(np.uint8)
