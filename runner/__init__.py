"""Interactive runs of inequality systems."""
