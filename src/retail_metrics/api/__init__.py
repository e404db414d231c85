"""HTTP API: request handlers, routes and response models."""
