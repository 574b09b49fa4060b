#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from c8vm.renderers.r_null import Renderer, RendererError, parse_palette


class TestRenderer(unittest.TestCase):
    def test_renderer_default_palette(self):
        self.assertEqual([b"\x22\x22\x22", b"\xDD\xDD\xDD"], parse_palette())

    def test_renderer_custom_palette(self):
        self.assertEqual([b"\x00\x00\x00", b"\x12\xAB\xFF"], parse_palette("000000,12abff"))

    def test_renderer_palette_wrong_count(self):
        self.assertRaises(RendererError, parse_palette, "000000")
        self.assertRaises(RendererError, parse_palette, "000000,111111,222222")

    def test_renderer_palette_wrong_length(self):
        self.assertRaises(RendererError, parse_palette, "000000,FFF")

    def test_renderer_palette_not_hex(self):
        self.assertRaises(RendererError, parse_palette, "000000,GGGGGG")
        self.assertRaises(RendererError, parse_palette, "-12345,FFFFFF")

    def test_renderer_null_accepts_palette(self):
        renderer = Renderer(scale=3, palette="000000,FFFFFF")
        self.assertEqual(3, renderer.scale)
        renderer.set_pixel(0, 0, True)
        self.assertTrue(renderer.refresh_needed)
        renderer.refresh_display()
        self.assertFalse(renderer.refresh_needed)
