"""Collaborators the simulation talks to: audio, persistence and input."""
