"""Registry: a local index of published packages.

The registry provides:
- Publishing: record a package version from a descriptor file
- Lookup: all versions of a name, in version order, or the latest one
- Release planning: the latest patch per minor line and the next version
"""
