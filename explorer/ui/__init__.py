"""
Presentation layer: frame snapshots in, pixels out.
"""
from .render_sync import RenderSync, RenderSink, build_snapshot
