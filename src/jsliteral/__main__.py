# topmark:header:start
#
#   project      : JsLiteral
#   file         : __main__.py
#   file_relpath : src/jsliteral/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running JsLiteral via ``python -m jsliteral``.

Delegates to :func:`jsliteral.cli.main.cli`, the same entry point as the
``jsliteral`` console script.
"""

from __future__ import annotations

from jsliteral.cli.main import cli

if __name__ == "__main__":
    cli()
