"""Configuration for UniAssist."""
