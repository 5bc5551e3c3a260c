from .developer import Developer

__all__ = ["Developer"]
