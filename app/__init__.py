# -*- coding: utf-8 -*-
"""
EventDesk Application Core Module
"""

from .config import Config

__all__ = ["Config"]
