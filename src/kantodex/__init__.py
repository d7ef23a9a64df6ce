"""Kantodex - a personal Kanto Pokedex tracker."""

__version__ = "0.1.0"
