from .loader import BUNDLED_ROOT, LoadedBundle, load_bundle
from .store import ContentStore

__all__ = ["BUNDLED_ROOT", "ContentStore", "LoadedBundle", "load_bundle"]
