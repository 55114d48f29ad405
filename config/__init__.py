"""
Configuration package for Faculty Directory Scraper.
"""

from config.settings import *

__all__ = ['settings']
