"""Cross-cutting application infrastructure: config, logging, HTTP errors."""
