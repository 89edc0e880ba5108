"""
Snapshot API clients for the Trade360 SDK.

- models: Filters, wire requests and response models
- mapping: Filter to wire request mapping
- prematch_client / inplay_client: Endpoint clients
"""
