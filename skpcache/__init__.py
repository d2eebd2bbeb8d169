"""Cache building blocks: entries, results, options, keys, serializers, compression, metrics and backend interfaces."""

__version__ = "0.1.0"