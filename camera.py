#camera.py

import constants as C
from raster import render_slice

class Camera:
    """
    Viewport onto an x-y slice of the noise field.

    (x, y) is the noise-space point at the centre of the screen and zoom is
    the number of screen pixels per lattice cell.
    """
    def __init__(self):
        self.x = C.CAMERA_START_X
        self.y = C.CAMERA_START_Y
        self.zoom = C.CAMERA_START_ZOOM
        self.dirty = True

    def noise_to_screen(self, noise_x, noise_y):
        screen_x = (noise_x - self.x) * self.zoom + C.SCREEN_WIDTH / 2
        screen_y = (noise_y - self.y) * self.zoom + C.SCREEN_HEIGHT / 2
        return int(screen_x), int(screen_y)

    def screen_to_noise(self, screen_x, screen_y):
        """Converts a point from screen coordinates to noise coordinates."""
        noise_x = (screen_x - C.SCREEN_WIDTH / 2) / self.zoom + self.x
        noise_y = (screen_y - C.SCREEN_HEIGHT / 2) / self.zoom + self.y
        return noise_x, noise_y

    def pan(self, dx, dy):
        """Pans the camera by a distance given in screen pixels."""
        # The field is unbounded, so there is nothing to clamp against.
        self.x += dx / self.zoom
        self.y += dy / self.zoom
        self.dirty = True

    def zoom_in(self):
        """Zooms in, clamping to a maximum zoom level."""
        self.zoom *= (1 + C.CAMERA_ZOOM_SPEED)
        self.zoom = min(self.zoom, C.CAMERA_MAX_ZOOM)
        self.dirty = True

    def zoom_out(self):
        """Zooms out, clamping to a minimum zoom level."""
        self.zoom *= (1 - C.CAMERA_ZOOM_SPEED)
        self.zoom = max(self.zoom, C.CAMERA_MIN_ZOOM)
        self.dirty = True

def render_view(camera, z):
    """Renders the visible part of the slice at depth z, downsampled for speed."""
    width = C.SCREEN_WIDTH // C.PREVIEW_DOWNSAMPLE
    height = C.SCREEN_HEIGHT // C.PREVIEW_DOWNSAMPLE
    # One raster pixel covers PREVIEW_DOWNSAMPLE screen pixels.
    cell_size = camera.zoom / C.PREVIEW_DOWNSAMPLE
    origin = camera.screen_to_noise(0, 0)
    camera.dirty = False
    return render_slice(width, height, cell_size, z, origin)
