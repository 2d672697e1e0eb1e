#!/usr/bin/env python3
# webmerc/version.py
"""
Version metadata for webmerc.
"""

__version__ = "1.0.0"
