"""Core utilities: bit operations, address hashing, C-style escaping, UTF-8 glyph lengths, sequence helpers, orderings, three-way merging and nested loops."""

__version__ = "0.1.0"