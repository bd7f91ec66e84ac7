"""
Main entry point for running the Map Colorer package.
"""

import sys
import logging
from .cli import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        logging.error(f"Error in main: {e}")
        sys.exit(1)
