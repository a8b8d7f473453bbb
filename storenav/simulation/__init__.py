# storenav/simulation/__init__.py

from .narrator import Narrator

__all__ = ["Narrator"]
