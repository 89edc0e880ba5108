"""
Named client registry for the Trade360 SDK.

- registry: Builder, registry and the per-name lazy validation state machine
- validation: Settings checks returning tagged configuration errors
- registration: Standard registrations for the five product clients
"""
