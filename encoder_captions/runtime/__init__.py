"""Runtime package.

Keep this module dependency-light: importing ``encoder_captions.runtime.*`` in
unit tests should not pull in the HTTP host.
"""

__all__: list[str] = []
