from .settings import StoreConfig

__all__ = ["StoreConfig"]
