"""Allow ``python -m trafficreport``."""

from trafficreport.cli import main

if __name__ == "__main__":
    main()
