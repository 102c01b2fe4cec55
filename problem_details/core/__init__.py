# This project was developed with assistance from AI tools.
"""Configuration for the problem details library."""
