#!/usr/bin/env python3
"""
Quick launcher for the OHLC Viewer
"""

import sys
from pathlib import Path

# Add current directory to path
sys.path.insert(0, str(Path(__file__).parent))

from ohlc_viewer.main import main

if __name__ == "__main__":
    sys.exit(main())
