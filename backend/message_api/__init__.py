"""Message API Package — contact-message storage over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
