"""Chart codecs and derived summaries."""
