"""Application – caching use cases built on the kernel store port."""
