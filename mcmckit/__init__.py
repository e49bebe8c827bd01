"""Markov chain Monte Carlo building blocks: settings, densities, bound transforms, proposals and NUTS helpers."""

__version__ = "2.1.0"