#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here, and are usually only drawn to the actual display (the
host rendering system) at 60Hz.  Programs cannot write directly into video
memory.  The screen can only be cleared, or have sprites XORed onto it.

A sprite is up to 15 bytes tall and always 8 pixels wide, with the most
significant bit of each byte on the left.  The drawing position and every
pixel of the sprite wrap around the edges of the screen, rather than being
clipped.

A collision is where any pixel was set, but was unset by the XOR.  It is
reported once for the whole sprite.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_NAME, VID_WIDTH, VID_HEIGHT

SPRITE_WIDTH = 8


class Framebuffer():
    def __init__(self, renderer, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        self.renderer = renderer
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.pixels = memoryview(bytearray(self.vid_size))
        self.renderer.set_resolution(vid_width, vid_height)
        self.report_perf()

    def clear(self):
        self.pixels[:] = bytes(self.vid_size)

        for y in range(self.vid_height):
            for x in range(self.vid_width):
                self.renderer.set_pixel(x, y, False)

    def xor_pixel(self, x, y):
        # Returns flagging any collision
        x %= self.vid_width
        y %= self.vid_height
        vram_loc = y * self.vid_width + x
        pixel = self.pixels[vram_loc]
        new_pixel = pixel ^ 1
        self.pixels[vram_loc] = new_pixel
        self.renderer.set_pixel(x, y, bool(new_pixel))

        return pixel != 0

    def draw_sprite(self, x, y, rows):
        # 'rows' is the sprite data, one byte per row
        x_pos = x % self.vid_width
        y_pos = y % self.vid_height
        collided = False

        for row, spr_data in enumerate(rows):
            for col in range(SPRITE_WIDTH):
                if spr_data & (0x80 >> col):
                    # Don't stop drawing.  Set the flag, and never unset it for this sprite.
                    if self.xor_pixel(x_pos + col, y_pos + row):
                        collided = True

        return collided

    def get_pixel(self, x, y):
        return bool(self.pixels[(y % self.vid_height) * self.vid_width + (x % self.vid_width)])

    def get_pixels(self):
        # Rows of booleans, top to bottom
        width = self.vid_width
        return [[bool(p) for p in self.pixels[y * width:(y + 1) * width]] for y in range(self.vid_height)]

    def refresh_display(self):
        self.renderer.refresh_display()

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def report_perf(self, fps=0, ops=0):
        title = "{} - {} FPS, {} OPS".format(APP_NAME, fps, ops)
        self.renderer.set_title(title)
