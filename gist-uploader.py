#!/usr/bin/env python3
"""
Gist Uploader - Command Line Interface
A tool for uploading local files to GitHub as gists
"""

from gist_uploader import gist_uploader

if __name__ == "__main__":
    gist_uploader.main()
