"""Run the TimeTrakGo monthly hours check from a source checkout.

Installed copies expose the same thing as the `timetrak-hours` console script.
"""

from timetrak_hours.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
