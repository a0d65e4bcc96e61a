"""
Convert an HTML class-schedule table into a split-semester recurring ICS calendar.
"""
__version__ = "0.1.0"
