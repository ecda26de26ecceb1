"""Conversion use cases: per-chart transcoding and container/directory fan-out."""
