"""Pure domain helpers: request context and payload schemas."""
