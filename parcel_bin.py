#!/usr/bin/env python3
"""
Source-checkout entrypoint.

Allows running the tool without installing it:
  python3 parcel_bin.py ...

Nothing is added to sys.path here. Whether the checkout's loader hook is
installed is decided by `parcel_bin.bootstrap` from BUILD_ENV/SELF_BUILD.
"""

import os

# Make this module behave like a package shim when imported as `parcel_bin`,
# so `parcel_bin.*` resolves to `src/parcel_bin/` from the script directory.
__path__ = [os.path.join(os.path.dirname(os.path.abspath(__file__)), "src", "parcel_bin")]


def main(argv: list[str] | None = None) -> int:
    from parcel_bin.bootstrap import main as _main

    return _main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
