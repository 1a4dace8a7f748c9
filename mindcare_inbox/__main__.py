"""
Entry point for running the application as a module.
"""

from .main import run

if __name__ == "__main__":
    run()
