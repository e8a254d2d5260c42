"""
Main entry point for the NOTICE checker when run as a module.
"""

import sys

from notice.notice_cli import main

if __name__ == '__main__':
    sys.exit(main())
