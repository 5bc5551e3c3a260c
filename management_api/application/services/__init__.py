from .developer_proxy import DeveloperProxy, PersistMode

__all__ = ["DeveloperProxy", "PersistMode"]
