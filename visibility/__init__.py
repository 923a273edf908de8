"""AI visibility toolkit: readability analysis, crawler detection and generators."""

__version__ = "0.1.0"
