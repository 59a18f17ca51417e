"""
Core domain logic: math text handling and board geometry.
"""
