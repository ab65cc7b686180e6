"""
Reviews resource: router, persistence and orchestration.
"""
