"""
Logging and metrics for rulecheck.
"""
