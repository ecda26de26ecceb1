# Where: maniaconv.shared
# What: Types shared across feature packages.
# Why: Let features depend on common errors without importing each other.
