"""Core models, ports and helpers shared by all collectors."""
