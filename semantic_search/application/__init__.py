"""Application layer: services that orchestrate core logic over the boundaries."""
