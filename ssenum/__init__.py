"""
ssenum - Secondary Structure Enumerator

Enumerates every secondary-structure candidate of a nucleotide sequence under
bounds on mutation count, bond count and eligible positions.
"""

__version__ = "0.1.0"

# Expose common submodules for convenience
from .core import *  # noqa: F401,F403
from .generation import *  # noqa: F401,F403
from .utils import *  # noqa: F401,F403
from .utils.observability import *  # noqa: F401,F403

# Expose configuration presets as top-level names
from .config import (  # noqa: F401
    DEFAULT_CONFIG,
    PRESET_PARALLEL,
    PRESET_SEQUENTIAL,
    resolve_config,
)
