from .errors import LoaderError
from .map_loader import load_map

__all__ = ["load_map", "LoaderError"]
