"""Models package for the Banker's Algorithm Simulator."""
