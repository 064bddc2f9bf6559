"""Allow ``python -m classmagic`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m classmagic`` behaves identically to the ``classmagic``
console script.
"""

from __future__ import annotations

from classmagic.cli.app import cli

if __name__ == "__main__":
    cli()
