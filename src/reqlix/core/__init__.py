# reqlix:header:start
#
#   project      : Reqlix
#   file         : __init__.py
#   file_relpath : src/reqlix/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Core value types shared by the store, the API and the CLI.

- `reqlix.core.errors`: error taxonomy and canonical messages.
- `reqlix.core.models`: requirement records returned by operations.
- `reqlix.core.results`: tagged success/failure results and batch parameters.
"""

from __future__ import annotations
