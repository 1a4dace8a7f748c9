"""
Base exception for the MindCare Inbox system.
"""


class MindCareError(Exception):
    """Base exception for all MindCare Inbox errors."""
    pass
