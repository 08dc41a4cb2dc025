"""Binding generation: layout resolution, input discovery and generator invocation."""
