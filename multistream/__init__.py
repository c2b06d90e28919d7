"""Configuration service for multi-destination live-stream broadcasting."""
