"""pkgid: names and versions for published packages.

Validates ``user/project`` package names, parses and orders
``major.minor.patch`` versions, and picks the latest release per
version line.
"""

__version__ = "0.1.0"
