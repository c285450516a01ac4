"""Tests for Minecraft colors and their hex values."""

import pytest

from bedwars_level.errors import UnknownColorError
from bedwars_level.formatting import MINECRAFT_COLOR_HEX, MinecraftFormatting, color_hex


class TestColorTable:
    def test_every_color_has_hex(self):
        for color in MinecraftFormatting:
            assert color in MINECRAFT_COLOR_HEX

    def test_hex_format(self):
        for hex_value in MINECRAFT_COLOR_HEX.values():
            assert hex_value.startswith("#")
            assert len(hex_value) == 7
            int(hex_value[1:], 16)  # validates hex

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            MINECRAFT_COLOR_HEX[MinecraftFormatting.GOLD] = "#000000"


class TestColorHex:
    def test_member(self):
        assert color_hex(MinecraftFormatting.GOLD) == "#FFAA00"

    def test_code(self):
        assert color_hex("§b") == "#55FFFF"

    def test_name(self):
        assert color_hex("dark_purple") == "#AA00AA"

    def test_unknown_raises(self):
        with pytest.raises(UnknownColorError):
            color_hex("chartreuse")

    def test_unknown_is_key_error(self):
        with pytest.raises(KeyError):
            color_hex("§z")

    def test_error_message_readable(self):
        with pytest.raises(UnknownColorError, match="chartreuse"):
            color_hex("chartreuse")
