# -*- coding: utf-8 -*-
"""Meals, daily calorie deficit and meal-photo analysis."""
