#!/usr/bin/env python3
"""
Convenience script to run the NOTICE checker from a source checkout.
"""

import sys
import os

# Add the source directory to the Python path
src_dir = os.path.join(os.path.dirname(__file__), 'src')
sys.path.insert(0, src_dir)

from notice.notice_cli import main

if __name__ == '__main__':
    sys.exit(main())
