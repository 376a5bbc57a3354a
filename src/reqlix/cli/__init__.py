# reqlix:header:start
#
#   project      : Reqlix
#   file         : __init__.py
#   file_relpath : src/reqlix/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Click command-line interface for Reqlix."""
