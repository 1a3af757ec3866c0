"""ghpx — npx wrapper for scoped packages on alternative registries.

Scoped packages are installed into a private per-package cache and run
from there; everything else is forwarded to ``npx`` untouched.
"""

from ghpx.version import __version__

__all__: list[str] = ["__version__"]
