# -*- coding: utf-8 -*-
"""Daily summary domain.

Aggregates one user's food, water and activity records for a calendar day.
Goal percentages are derived separately (``goal_progress``).
"""
