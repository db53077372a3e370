"""Timed Snake: a timer-driven grid snake engine with a WebSocket front end."""
