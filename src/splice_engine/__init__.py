"""Marker-delimited text splicing for generated source files.

Blocks managed by the engine are wrapped in a pair of identical sentinels:

    // SimpleStorageConstructor
    ... managed content ...
    // SimpleStorageConstructor

Anything outside the sentinels is preserved untouched.
"""

__version__ = "0.1.0"
