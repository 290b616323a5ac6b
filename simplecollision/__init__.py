"""Two-dimensional collision simulation of equal-mass balls, with a Tkinter window."""

__version__ = "1.0.0"
__all__ = ["__version__"]