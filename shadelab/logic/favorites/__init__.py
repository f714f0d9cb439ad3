from .engine import Favorites
from .store import FavoritesStore, JsonFileFavoritesStore, MemoryFavoritesStore, default_store_path
