"""Configuration package for maniaconv."""
