"""HTTP service: OAuth registration and logbook webhooks."""
