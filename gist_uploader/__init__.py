#!/usr/bin/env python3
"""
Gist Uploader package.
"""

__version__ = "1.0.0"
