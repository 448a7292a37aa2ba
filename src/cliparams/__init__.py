"""cliparams: self-describing command-line parameters.

Programs declare typed parameters by (section, key), bind them to flags or
positional arguments, keep their values in ini files and describe
themselves to host applications through an XML manifest.
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401
