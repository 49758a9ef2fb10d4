from .keep_alive import KeepAliveJob

__all__ = ["KeepAliveJob"]
