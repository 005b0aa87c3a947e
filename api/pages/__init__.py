"""
Two-level page hierarchy: top-level pages and their subpages.
"""
