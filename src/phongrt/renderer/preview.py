# renderer/preview.py
import logging

import pygame

from phongrt.config import DISPLAY_SETTINGS
from phongrt.renderer.canvas import Canvas

logger = logging.getLogger(__name__)


def show(canvas: Canvas, caption: str = None, scale: int = None):
    """
    Opens a window showing `canvas` and blocks until it is closed or Escape
    is pressed.
    """
    caption = caption or DISPLAY_SETTINGS['caption']
    scale = scale or DISPLAY_SETTINGS['scale']
    window_size = (canvas.width * scale, canvas.height * scale)

    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption(caption)

        # surfarray indexes pixels as [x, y]
        surface = pygame.surfarray.make_surface(canvas.to_rgb8().transpose(1, 0, 2))
        if scale != 1:
            surface = pygame.transform.scale(surface, window_size)

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(DISPLAY_SETTINGS['fps'])
    finally:
        logger.debug("Closing preview window")
        pygame.quit()
