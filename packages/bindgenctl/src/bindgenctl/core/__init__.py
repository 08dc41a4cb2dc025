"""Core runtime primitives: context, errors, logging and process execution."""
