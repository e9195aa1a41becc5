"""Configure test suite environment"""
import os
import sys

# Make the src package importable without installing the project
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

# Powertools settings must be in place before any handler module is imported
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("STAGE", "test")
