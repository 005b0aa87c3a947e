"""
Admin login and bearer-token checks.
"""
