"""
policies package — option strings sourced from files.
"""

from .file_policy import load_option_file

__all__ = ["load_option_file"]
