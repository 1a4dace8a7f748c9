"""
MindCare Inbox: provider conversation derivation and synchronization.
"""

__version__ = "1.0.0"
