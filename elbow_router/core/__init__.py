"""
Core configuration, batch processing and exceptions for elbow_router
"""
