"""
Interview coach backend.

AI mock interviews grounded in a candidate's resume and a job description,
with asynchronous post-interview analysis.
"""

__version__ = "0.1.0"
