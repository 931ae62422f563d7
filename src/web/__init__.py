"""
Web interface module for the roster tools.

Provides a FastAPI-based web server for:
- Generating balanced teams
- Running ranking tournaments one comparison at a time
"""
