"""
Interview feedback service.

Generates structured AI feedback for mock interviews with Gemini, stores it
in Firestore, and serves interview and feedback lookups.
"""

__version__ = "1.0.0"
