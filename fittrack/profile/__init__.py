# -*- coding: utf-8 -*-
"""Profile header block and the weight/TDEE log."""
