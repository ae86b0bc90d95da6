"""
Utility modules for reprand (logging, string formatting, environment access).
"""
