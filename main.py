#main.py

import os
import pygame
import constants as C
from camera import Camera, render_view
from raster import make_surface, save_image
from time_manager import TimeManager
import logger

SPEED_KEYS = {
    pygame.K_0: 0, pygame.K_1: 1, pygame.K_2: 2,
    pygame.K_3: 3, pygame.K_4: 4, pygame.K_5: 5,
}

def initialize_preview():
    logger.log("Attempting to initialize Pygame...")
    pygame.init()
    logger.log(f"Creating display surface with width: {C.SCREEN_WIDTH} and height: {C.SCREEN_HEIGHT}")
    screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    pygame.display.set_caption("Perlin Noise Preview")
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    logger.log("Display surface and font created.")
    return screen, font

def save_screenshot(pixels, z, directory=C.SCREENSHOT_DIR):
    """Saves the current frame's raster as a PNG named after its depth."""
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, f"noise_z{z:08.3f}.png")
    save_image(path, pixels)
    return path

def handle_keydown(key, time_manager, pixels):
    if key == pygame.K_SPACE: time_manager.toggle_pause()
    elif key in SPEED_KEYS: time_manager.set_speed(SPEED_KEYS[key])
    elif key == pygame.K_s: save_screenshot(pixels, time_manager.z)

def draw_hud(screen, font, camera, time_manager):
    text = f"{time_manager.get_display_string()} | centre: ({camera.x:.2f}, {camera.y:.2f}) | zoom: {camera.zoom:.1f}px"
    text_surface = font.render(text, True, C.COLOR_WHITE, C.COLOR_BLACK)
    screen.blit(text_surface, (C.UI_HUD_POS_X, C.UI_HUD_POS_Y))

def run_preview():
    screen, font = initialize_preview()
    clock = pygame.time.Clock()
    camera = Camera()
    time_manager = TimeManager()
    logger.set_time_manager(time_manager)

    logger.log("Starting preview loop...")
    logger.log("CONTROLS: [SPACE] to Pause, [0-5] to set Speed, [S] to save a frame, arrows to pan, wheel to zoom.")

    pixels = render_view(camera, time_manager.z)
    running = True
    while running:
        # Capped so a slow frame does not jump the slice far along z.
        real_delta_seconds = min(clock.tick(C.CLOCK_TICK_RATE) / C.MILLISECONDS_PER_SECOND, C.MAX_FRAME_DELTA_SECONDS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT: running = False
            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 4: camera.zoom_in()
                elif event.button == 5: camera.zoom_out()
            if event.type == pygame.KEYDOWN:
                handle_keydown(event.key, time_manager, pixels)

        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT]: camera.pan(-C.CAMERA_PANSPEED_PIXELS, 0)
        if keys[pygame.K_RIGHT]: camera.pan(C.CAMERA_PANSPEED_PIXELS, 0)
        if keys[pygame.K_UP]: camera.pan(0, -C.CAMERA_PANSPEED_PIXELS)
        if keys[pygame.K_DOWN]: camera.pan(0, C.CAMERA_PANSPEED_PIXELS)

        if time_manager.get_scaled_delta(real_delta_seconds) > 0:
            time_manager.advance(real_delta_seconds)
            camera.dirty = True

        if camera.dirty:
            pixels = render_view(camera, time_manager.z)

        frame = pygame.transform.scale(make_surface(pixels), (C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
        screen.blit(frame, (0, 0))
        draw_hud(screen, font, camera, time_manager)
        pygame.display.flip()

    logger.log("Preview loop ended.")

def shutdown_preview():
    logger.log("Quitting Pygame...")
    pygame.quit()
    logger.set_time_manager(None)
    logger.log("Preview ended cleanly.")

def main():
    logger.log("--- Preview Start ---")
    try:
        run_preview()
    finally:
        shutdown_preview()
    logger.log("--- Preview Exit ---")

if __name__ == '__main__':
    main()
