# -*- coding: utf-8 -*-
"""Workout sessions: one sheet per category, one column per session."""
