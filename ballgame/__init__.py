"""An arcade game of dodging bouncing balls and collecting stars, drawn with pygame."""

__version__ = "0.1.0"