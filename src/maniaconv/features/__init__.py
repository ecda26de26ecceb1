"""Feature packages for chart conversion."""
