"""hddcheck test suite."""
