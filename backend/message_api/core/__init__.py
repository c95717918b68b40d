"""Core — error types shared by services, infrastructure and API layers."""
