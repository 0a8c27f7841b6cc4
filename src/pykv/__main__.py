"""
Module entry point for: python -m pykv <path to event data>
"""

from .cli import main


if __name__ == "__main__":
    main()
