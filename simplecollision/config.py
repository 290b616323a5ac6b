"""Simulation and display settings."""

FPS_MAX = 240
TIME_STEP_MILLIS = 1000.0 / FPS_MAX
BALL_RADIUS = 15.0
BALLS_COUNT = 10
ARROW_LENGTH_SCALING = 60.0
ENERGY_PRECISION = 3

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "simple collision"
TEXT_POSITION = (10, 10)

BALL_COLOUR = (0, 0, 255)
ARROW_COLOUR = (255, 0, 0)
ARROW_WIDTH = 2
TEXT_COLOUR = (255, 255, 255)
BACKGROUND_COLOUR = (70, 70, 70)