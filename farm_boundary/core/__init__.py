"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Earth model, unit conversions, coordinate bounds
- exceptions: Custom exception hierarchy
"""
