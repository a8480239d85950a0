"""Core infrastructure for dircount: paths and configuration."""
