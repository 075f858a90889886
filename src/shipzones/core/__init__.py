"""Core types and configuration for shipzones."""
