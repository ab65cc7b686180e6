"""
Comments resource: router, persistence and orchestration.
"""
