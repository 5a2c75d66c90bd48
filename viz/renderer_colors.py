# viz/renderer_colors.py
BG = (15, 23, 42)
HUD_BG = (30, 41, 59)
FOOD = (239, 68, 68)       # #ef4444
OBSTACLE = (124, 58, 237)  # #7c3aed
HEAD = (16, 185, 129)      # #10b981
BODY = (16, 185, 129)      # alpha fades with distance from the head
TEXT = (226, 232, 240)
MUTED = (148, 163, 184)

BODY_MIN_ALPHA = 0.3
BODY_FADE_LEN = 12
