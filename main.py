#main.py

import pygame
import cProfile
import pstats
import constants as C
from camera import Camera
from gradient_field import GradientField
from random_source import RandomUnitVectorSource
from renderer import NoiseRenderer
from ui import draw_loading_screen, draw_hud, hud_text
import logger

def initialize_preview():
    logger.log("Attempting to initialize Pygame...")
    pygame.init()
    logger.log("Pygame initialized successfully.")
    logger.log(f"Creating display surface with width: {C.SCREEN_WIDTH} and height: {C.SCREEN_HEIGHT}")
    screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    pygame.display.set_caption(C.WINDOW_CAPTION)
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    logger.log("Display surface and font created.")
    return screen, font

def build_field(source):
    field = GradientField(C.BOX_SIDE_LENGTH)
    field.populate(source)
    logger.set_gradient_field(field)
    return field

def render_with_loading_bar(renderer, screen, font):
    def progress(done, total):
        # Keep the window responsive while sampling.
        pygame.event.pump()
        draw_loading_screen(screen, font, done, total)
    renderer.generate(progress)

def run_preview():
    screen, font = initialize_preview()
    clock = pygame.time.Clock()
    source = RandomUnitVectorSource(C.GRADIENT_NOISE_SEED)
    field = build_field(source)
    camera = Camera(field.size)
    renderer = NoiseRenderer(field, C.SAMPLE_STEP_SIZE)
    render_with_loading_bar(renderer, screen, font)

    logger.log("Starting preview loop...")
    logger.log("CONTROLS: [R] to Reseed, [S] to toggle fade smoothing, arrows to Pan, wheel to Zoom.")

    running = True
    while running:
        clock.tick(C.CLOCK_TICK_RATE)

        for event in pygame.event.get():
            if event.type == pygame.QUIT: running = False
            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 4: camera.zoom_in()
                elif event.button == 5: camera.zoom_out()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    source.reseed(int(source.rng.integers(0, 2**31)))
                    field.populate(source)
                    logger.log("Event: Gradient field re-seeded.")
                    render_with_loading_bar(renderer, screen, font)
                if event.key == pygame.K_s:
                    renderer.set_smooth(not renderer.sampler.smooth)
                    render_with_loading_bar(renderer, screen, font)

        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT]: camera.pan(-C.CAMERA_PANSPEED_PIXELS, 0)
        if keys[pygame.K_RIGHT]: camera.pan(C.CAMERA_PANSPEED_PIXELS, 0)
        if keys[pygame.K_UP]: camera.pan(0, -C.CAMERA_PANSPEED_PIXELS)
        if keys[pygame.K_DOWN]: camera.pan(0, C.CAMERA_PANSPEED_PIXELS)

        screen.fill(C.COLOR_VOID)
        renderer.draw(screen, camera)
        camera.draw_box_border(screen)
        draw_hud(screen, font, hud_text(field, renderer.sampler.smooth))
        pygame.display.flip()

    logger.log("Preview loop ended.")

def shutdown_preview():
    logger.log("Quitting Pygame...")
    pygame.quit()
    logger.log("Preview ended cleanly.")

def main():
    logger.log("--- Preview Start ---")
    run_preview()
    shutdown_preview()
    logger.log("--- Preview Exit ---")

if __name__ == '__main__':
    profiler = cProfile.Profile()
    try:
        profiler.run('main()')
    except SystemExit:
        # This allows the preview to exit cleanly without a profiler error
        pass
    finally:
        print("\n\n--- PROFILER REPORT ---")
        stats = pstats.Stats(profiler)
        # Sort the stats by the cumulative time spent in each function
        stats.sort_stats(pstats.SortKey.CUMULATIVE)
        stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)
