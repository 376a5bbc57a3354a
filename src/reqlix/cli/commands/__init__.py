# reqlix:header:start
#
#   project      : Reqlix
#   file         : __init__.py
#   file_relpath : src/reqlix/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Reqlix CLI subcommands."""
