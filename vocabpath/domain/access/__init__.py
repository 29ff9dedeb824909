"""Access bounded context: payment state and administrative overrides."""
