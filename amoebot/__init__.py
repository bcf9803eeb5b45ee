"""Simulation engine for the amoebot model of programmable matter."""

__version__ = "0.1.0"

__all__ = [
    "node",
    "objects",
    "particle",
    "metric",
    "rng",
    "system",
    "localparticle",
    "amoebotparticle",
    "amoebotsystem",
    "simulator",
    "view",
]