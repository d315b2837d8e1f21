"""Wire records, version parsing, key bindings and search-table logic for synced shell history."""

__version__ = "0.1.0"