"""Screen, timing and stage constants shared by the game."""

FRAMERATE = 60.0

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

STAGE_MAX_WIDTH = 1000
STAGE_MAX_HEIGHT = 1000

BOX_SIZE = 48