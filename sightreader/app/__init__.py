"""Application layer: practice session wiring, CLI and Explain Mode tracing."""
