"""SVG icon normalizer: rescale icon geometry onto a uniform square frame."""

__version__ = "0.1.0"
