"""Simple launcher for the interactive city navigator.

Equivalent to the ``citynav`` console script; handy when running from a
source checkout without installing the package.
"""

from __future__ import annotations

from citynav.cli import main

if __name__ == "__main__":
    main()
