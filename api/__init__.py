"""
REST API for the whiteboard math toolkit.
"""
