"""ActionTracker weapon deck engine."""
