"""Stochastic SEIR epidemics on preferential-attachment social graphs."""

__version__ = "0.1.0"
