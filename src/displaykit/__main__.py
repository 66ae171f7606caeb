# topmark:header:start
#
#   project      : DisplayKit
#   file         : __main__.py
#   file_relpath : src/displaykit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DisplayKit via ``python -m displaykit``.

Delegates to :func:`displaykit.cli.main.cli`, the same entry point as the
``displaykit`` console script.

Examples:
    Print the color for a user name::

        python -m displaykit color alice
"""

from __future__ import annotations

from displaykit.cli.main import cli

if __name__ == "__main__":
    cli()
