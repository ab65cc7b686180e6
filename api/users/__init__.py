"""
Users resource: router, persistence and orchestration.
"""
