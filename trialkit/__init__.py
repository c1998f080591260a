"""String sets, tuple and list helpers, a wildcard trie, text normalization and file loaders."""

__version__ = "0.1.0"