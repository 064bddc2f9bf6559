"""classmagic — Java class-file magic number checker.

Reads the first four bytes of a file and compares them against the
``0xCAFEBABE`` signature every class file starts with.
"""

from classmagic.version import __version__

__all__: list[str] = ["__version__"]
