"""Top-level package for appdef.

This package converts an application definition document (`appdef.xml`) into
a typed, serializable configuration consumed by downstream build steps. The
main entry points are `convert` and `ConvertConfigTask`.
"""

from .pipeline import ConfigConverter, ConvertConfigTask, convert

__all__ = ["ConfigConverter", "ConvertConfigTask", "convert", "__version__"]

__version__ = "0.1.0"
