"""
osview - terminal viewer for OpenStack compute instances.

Authenticates against a Keystone v3 identity service, then lists the
servers of the scoped project in a live curses table.

Usage:
    python -m osview
    python -m osview --compute-url http://nova.example.com:8774/v2.1
"""

__version__ = "0.1.0"
