"""
Core domain models of the Asset Converter.

Modules:
    exceptions.py: The exception hierarchy. Filesystem and encoder failures
                   are distinct so the batch runner can report what failed.
    media.py: Value objects for asset roots, conversion targets and the
              relative identity (subdirectory + base name) of a raw file.
"""
