"""
Football Tournament Simulator Dashboard

Dashboard service for running Monte Carlo knockout-tournament simulations
and managing the model pipeline of a remote simulation backend.
"""

__version__ = "1.0.0"
