# reqlix:header:start
#
#   project      : Reqlix
#   file         : __main__.py
#   file_relpath : src/reqlix/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Module entry point for running Reqlix via ``python -m reqlix``.

Delegates to :func:`reqlix.cli.main.cli`, the same entry point used by the
``reqlix`` console script.

Examples:
    List the categories of the current project::

        python -m reqlix categories
"""

from __future__ import annotations

from reqlix.cli.main import cli

if __name__ == "__main__":
    cli()
