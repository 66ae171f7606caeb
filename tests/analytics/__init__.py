# topmark:header:start
#
#   project      : DisplayKit
#   file         : __init__.py
#   file_relpath : tests/analytics/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
