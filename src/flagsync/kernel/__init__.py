"""Kernel – errors, value objects and time primitives shared by every layer."""
