#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
debug output, or are running without a display.  The framebuffer still holds
the screen contents, so it can be inspected at any time.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


DEFAULT_PALETTE = "222222,DDDDDD"


class RendererError(Exception):
    pass


def parse_palette(palette=None):
    # Background and foreground as comma-separated hex, e.g. "000000,FFFFFF".  Returns a pair of RGB byte strings.
    palette_split = (DEFAULT_PALETTE if palette is None else palette).split(",")

    if len(palette_split) != 2:
        raise RendererError("Palette must define exactly two colours, background and foreground.")

    rgb_map = []

    for colour in palette_split:
        if len(colour) != 6:
            raise RendererError("Palette colours must all be 6 hex digits long.")

        try:
            value = int(colour, 16)

            if value < 0:
                raise ValueError(colour)
        except ValueError:
            raise RendererError("Invalid palette colour defined.") from None

        rgb_map.append(bytes([value >> 16, (value >> 8) & 0xFF, value & 0xFF]))

    return rgb_map


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.title = ""
        self.refresh_needed = False
        self.set_resolution(0, 0)

    def set_resolution(self, width, height):
        self.width = width
        self.height = height

    def set_pixel(self, x, y, on):  # pylint: disable=unused-argument
        self.refresh_needed = True

    def refresh_display(self):
        self.refresh_needed = False

    def set_title(self, title):
        self.title = title

    def shutdown(self):
        pass
