#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Used by a Framebuffer object to draw the screen.  This draws graphics onto an
SDL window surface via PyGame.  The surface is allocated at the emulated
resolution, and then the contents are stretched (using 'Nearest Neighbour'
translation) to fit the window itself.  This means we don't have to draw the
same pixel multiple times.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import Renderer as RendererBase, parse_palette
from ..constants import APP_NAME


class Renderer(RendererBase):
    def __init__(self, scale=None, palette=None, **kwargs):
        if scale is None:
            scale = 512  # Default window width if not supplied, or set to default

        # Check the palette before opening a window.  Split RGB values for faster byte-based lookup later
        self.rgb_map = parse_palette(palette)
        pygame.display.init()
        pygame.display.set_caption(APP_NAME)
        self.rgb_buffer = None
        self.scaled_size = (scale, scale // 2)
        self.display_surface = pygame.display.set_mode(self.scaled_size)

        super().__init__(scale)

    def set_resolution(self, width, height):
        total_pixels = width * height
        # Fill the offscreen RGB buffer with the background colour
        self.rgb_buffer = memoryview(bytearray(self.rgb_map[0] * total_pixels))

        # Call superclass method so display size is known on the next refresh
        super().set_resolution(width, height)

    def set_pixel(self, x, y, on):
        # Update RGB buffer in-place to minimise allocations and PyGame calls
        rgb_location = (y * self.width + x) * 3
        self.rgb_buffer[rgb_location:rgb_location + 3] = self.rgb_map[int(on)]
        super().set_pixel(x, y, on)

    def refresh_display(self):
        if self.refresh_needed and self.width and self.height:
            # Blit the bytearray straight to the surface, rather than lots of PixelArray updates
            render_surface = pygame.image.frombuffer(self.rgb_buffer, (self.width, self.height), "RGB")
            scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
            self.display_surface.blit(scaled_win, (0, 0))
            pygame.display.flip()

        super().refresh_display()

    def set_title(self, title):
        pygame.display.set_caption(title)
        super().set_title(title)

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
