#ui.py

import pygame
import constants as C

def draw_loading_screen(screen, font, progress, total):
    """Draws a progress bar and loading text."""
    screen.fill(C.COLOR_BLACK)

    # Render text
    text_surface = font.render("Sampling Noise...", True, C.COLOR_WHITE)
    text_rect = text_surface.get_rect(center=(C.SCREEN_WIDTH / 2, C.SCREEN_HEIGHT / 2 - C.UI_LOADING_TEXT_OFFSET_Y))
    screen.blit(text_surface, text_rect)

    # Draw progress bar
    bar_width = C.UI_LOADING_BAR_WIDTH
    bar_height = C.UI_LOADING_BAR_HEIGHT
    bar_x = (C.SCREEN_WIDTH - bar_width) / 2
    bar_y = (C.SCREEN_HEIGHT - bar_height) / 2

    progress_ratio = progress / total if total else 1.0
    current_bar_width = bar_width * progress_ratio

    # Background of the bar
    pygame.draw.rect(screen, C.COLOR_LOADING_BAR_BG, (bar_x, bar_y, bar_width, bar_height))
    # Foreground of the bar
    pygame.draw.rect(screen, C.COLOR_LOADING_BAR_FG, (bar_x, bar_y, current_bar_width, bar_height))

    pygame.display.flip()

def draw_hud(screen, font, text):
    hud_surface = font.render(text, True, C.COLOR_WHITE)
    screen.blit(hud_surface, (C.UI_HUD_POS_X, C.UI_HUD_POS_Y))

def hud_text(field, smooth):
    seed = "?" if field.seed is None else field.seed
    mode = "fade" if smooth else "linear"
    return f"Size: {field.size} | Seed: {seed} | Interp: {mode} | [R] reseed [S] smooth"
