"""Runtime engine version."""

from .main import uucodec


__version__ = uucodec.ENGINE_VERSION


__all__ = ["__version__"]
