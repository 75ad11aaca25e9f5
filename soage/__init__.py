"""soage - Stack Overflow user age checker."""

from soage.models.profile import NormalizedProfile
from soage.models.raw import RawProfile
from soage.models.result import LookupResult
from soage.config import ServiceConfig
from soage.core.lookup import ProfileLookup
from soage.core.exporter import to_json, to_dict, save_json

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "ProfileLookup",
    "ServiceConfig",
    # Models
    "NormalizedProfile",
    "RawProfile",
    "LookupResult",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "__version__",
]
