# -*- coding: utf-8 -*-
"""Calendar view: which days had a workout or a run."""
