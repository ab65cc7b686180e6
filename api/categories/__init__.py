"""
Categories resource: router, persistence and orchestration.
"""
