"""
Unit Test Layer Configuration

Structure:
    tests/unit/
    └── golden/      Characterization of translation, parsing, store and
                     instrumentation behavior

Usage:
    pytest tests/unit -v
    pytest tests/unit -m golden -v
"""
import os
import sys

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
