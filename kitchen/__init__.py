"""Closures captured by reference or by value, and a chef with a secret."""
