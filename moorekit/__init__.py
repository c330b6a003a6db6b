"""Moore finite state machines, polling-loop helpers and a WiFi manager example."""

__version__ = "1.0.0"