"""deve-overflow — shared front-end support library.

Constants, formatting helpers and the user record shape consumed by the
deve-overflow presentation and data-access layers.
"""

from deve_overflow.version import __version__

__all__: list[str] = ["__version__"]
