"""
Core utilities: error taxonomy and outbound call policy.

Shared by the chain and market clients, the orchestrator, and the adapters.
"""
