"""
SQLite Probe - database driver smoke test

Opens an in-memory SQLite database, asks the engine for its version
string, logs it, and releases the connection.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
