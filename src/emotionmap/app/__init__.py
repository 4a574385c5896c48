"""
Qt application: signal store, main window and panels.
"""
