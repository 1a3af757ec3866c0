"""Single source of truth for the ghpx version string."""

__version__: str = "1.0.0"
