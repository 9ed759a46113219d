"""
Core processing logic: content processing, quiz generation, and scoring.
"""
