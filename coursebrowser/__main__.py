"""
Package entry point.

Allows running the application via:

    python -m coursebrowser

This simply forwards execution to coursebrowser.cli.main().
"""

from coursebrowser.cli import main

if __name__ == "__main__":
    main()
