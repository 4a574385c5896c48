"""
The CONTROLLER layer runs work that must not block the GUI thread.
"""
