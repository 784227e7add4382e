"""underbar: composable combinators over sequences and mappings."""

from underbar.functional import *  # noqa: F401,F403
from underbar.functional import __all__

__version__ = "0.1.0"
