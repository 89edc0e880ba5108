"""
Customers API clients for the Trade360 SDK.

- models: Filters, wire requests and response models
- mapping: Filter to wire request mapping
- validators: Client-side request checks
- metadata_client / package_distribution_client / subscription_client: Endpoint clients
"""
