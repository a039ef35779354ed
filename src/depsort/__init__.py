"""depsort - Order build files by dependencies inferred from their names."""

from .core import sort_files, sort_paths, sort_records
from .models import DependencyRecord
from .utils import CircularDependencyError

__version__ = "0.1.0"
__all__ = [
    "sort_files",
    "sort_paths",
    "sort_records",
    "DependencyRecord",
    "CircularDependencyError",
]
