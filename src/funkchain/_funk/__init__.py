from ._main import Funk, wrap

__all__ = ["Funk", "wrap"]
