# -*- coding: utf-8 -*-
"""Run log (one row per run)."""
