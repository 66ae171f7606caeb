# topmark:header:start
#
#   project      : DisplayKit
#   file         : __init__.py
#   file_relpath : src/displaykit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DisplayKit CLI commands."""
