"""
Qt widget helpers: list and table decoration, dialogs and small widgets.
"""
