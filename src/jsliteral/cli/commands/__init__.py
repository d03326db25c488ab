# topmark:header:start
#
#   project      : JsLiteral
#   file         : __init__.py
#   file_relpath : src/jsliteral/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsLiteral CLI subcommands."""
