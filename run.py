#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Examples:
    # Two players at one terminal
    python run.py play --p1-color red --p2-color yellow

    # Bigger board with detailed logging
    python run.py --debug_level debug play --rows 7 --cols 8

    # Analyse a position (values row by row from the top)
    python run.py test --position 0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,1,1,1,2,2,2

    # Benchmark the engine
    python run.py benchmark --iterations 5000
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
