"""
Algorithms package for the Banker's Algorithm Simulator.
Contains the order safety evaluator and the order enumerator.
"""
