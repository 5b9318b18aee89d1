"""
Core building blocks shared by every domain: DDD base classes,
dependency container, application factory and shared utilities.
"""
