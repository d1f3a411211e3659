"""Brute-force search for large slime-chunk clusters in seeded worlds."""
