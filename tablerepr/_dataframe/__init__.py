from . import _common
from ._common import *  # noqa: F403,F401

__all__ = list(_common.__all__)
