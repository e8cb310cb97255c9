#!/usr/bin/env python3
"""
Script to generate an SPK document from the command line.
This is a thin wrapper around the spk_generator package.
"""

import sys
from spk_generator.cli import main

if __name__ == '__main__':
    sys.exit(main())
