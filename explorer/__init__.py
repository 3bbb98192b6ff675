"""
Mesopotamia Explorer - a side-scrolling artifact discovery game.
"""
