"""
Entry point for elbow_router CLI
"""
import sys

from route import main

if __name__ == '__main__':
    sys.exit(main())
