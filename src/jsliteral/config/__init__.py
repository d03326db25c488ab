# topmark:header:start
#
#   project      : JsLiteral
#   file         : __init__.py
#   file_relpath : src/jsliteral/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for JsLiteral.

Submodules:
    * `jsliteral.config.logging`: TRACE-aware, colored logging setup.
    * `jsliteral.config.loaders`: TOML discovery and parsing (tomlkit).
    * `jsliteral.config.model`: the immutable `JsliteralConfig`.

Import from the submodules directly; the core imports the logging module and
must not pull in the rest of the config layer.
"""
