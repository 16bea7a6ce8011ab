"""
buffet_race module: render/colors.py

Central color palette.
"""

BG = (17, 24, 39)
FLOOR = (68, 68, 102)
FLOOR_EDGE = (34, 34, 51)
HUD_BG = (248, 249, 250)
HUD_TEXT = (31, 41, 55)
HUD_ACCENT = (25, 118, 210)
OVERLAY = (17, 24, 39)
TEXT = (235, 235, 235)
SHADOW = (20, 20, 30)


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
