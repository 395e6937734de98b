"""Runtime configuration for the meteor dodge game."""
