"""Platform adapters: logging, archive codec and filesystem helpers."""
