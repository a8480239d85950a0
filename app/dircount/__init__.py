"""dircount - directory entry count metric for monitoring agents."""

from dircount.vfs.metric import collect, count, export

__version__ = "0.1.0"

__all__ = ["__version__", "collect", "count", "export"]
