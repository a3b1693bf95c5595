from .map_value import map_value

__all__ = ["map_value"]
