from .api import register_places_tools

__all__ = ["register_places_tools"]
