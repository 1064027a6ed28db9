"""
talentscreen: resume screening and automated interview assessment.
"""
__version__ = "1.0.0"
