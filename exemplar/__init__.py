"""Small example programs: text tools, conversions, deep equality, images, compression and fetching."""

__version__ = "1.0.0"