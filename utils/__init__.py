"""Utils package for the Banker's Algorithm Simulator."""
