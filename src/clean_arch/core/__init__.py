"""Shared kernel: exceptions and value objects usable from every layer."""
