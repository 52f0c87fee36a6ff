"""HTTP API for twentyfour."""
