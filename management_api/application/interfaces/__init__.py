from .transport import Transport

__all__ = ["Transport"]
