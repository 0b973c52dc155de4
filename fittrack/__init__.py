# -*- coding: utf-8 -*-
"""Personal workout, run and diet tracker backed by a spreadsheet."""

__version__ = "0.1.0"
