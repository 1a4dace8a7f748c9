"""
Core models, enums and exceptions.
"""
