"""
Drawing helpers (fonts, text layout).
"""
