from .developer import DeveloperSnapshot

__all__ = ["DeveloperSnapshot"]
