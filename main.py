"""
Entry point for the ProLegal command-line client
"""

import sys
import os

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from tools.cli import main

if __name__ == "__main__":
    main()
