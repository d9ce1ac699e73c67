"""
Non-visual infrastructure for uihelper: configuration, errors and logging.
"""
