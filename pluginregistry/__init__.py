"""Client for a plugin registry API with verified artifact downloads."""

__version__ = "0.1.0"

__all__ = ["client", "errors", "meta", "options", "platform", "types", "verify"]