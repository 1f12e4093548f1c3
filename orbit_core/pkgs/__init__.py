"""Library packages: geometry core, runtime and observability."""
