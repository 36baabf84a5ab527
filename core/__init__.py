"""
Core business logic

This package holds the RSVP state and everything it depends on:
- RsvpRegistry: owns the player -> status mapping
- Logger: the logging capability injected into the registry
- Exceptions: the error taxonomy shared with the report pipeline
"""
