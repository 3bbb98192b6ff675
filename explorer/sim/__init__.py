"""
Frame scheduling and frame data contracts.

Small primitives that keep the game loop free of a hard dependency on the
display clock, so ticks can be stepped deterministically in tests and tools.
"""
