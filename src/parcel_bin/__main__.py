"""
`python -m parcel_bin` entrypoint.

The installed console script `parcel` calls the same
`parcel_bin.bootstrap:main`.
"""

from .bootstrap import main


if __name__ == "__main__":
    raise SystemExit(main())
