# viz/renderer_colors.py
BG = (173, 204, 96)        # green
FG = (43, 51, 24)          # dark green: border, text, snake
FOOD = (200, 70, 70)       # only used when the food texture is missing
