"""
Edit History Logging

Records who created, updated, drafted or deleted which content item,
when, and from where.
"""
