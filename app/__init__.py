# -*- coding: utf-8 -*-
"""
Application core module
"""

from .config import Config

__all__ = ["Config"]
