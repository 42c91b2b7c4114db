# -*- coding: utf-8 -*-
"""Calorie and nutrition tracking backend."""

__version__ = "1.0.0"
