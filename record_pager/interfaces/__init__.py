from .dataset import DatasetQuery, Key

__all__ = ["DatasetQuery", "Key"]
