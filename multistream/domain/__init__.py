"""
Domain layer containing core business logic and domain services.

Submodules:
- platforms: Streaming destination adapters, registry and field validation.
- presets: Preset text import.
- live: Live session configuration (quick start, readiness).
- utils: Domain-specific utilities (e.g., ID generation, title suggestions).
"""
