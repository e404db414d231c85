"""Fixed source data used by the mock data generators."""
