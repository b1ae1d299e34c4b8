"""
Application Layer for the Split Tracker API.

This package contains:
- ports/: Repository interfaces the workout services depend on
- exceptions: Errors raised by services and repositories
"""
