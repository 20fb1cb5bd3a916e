"""Application services (orchestration over adapters)."""
