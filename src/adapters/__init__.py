"""Adaptadores: codec JSON y exportación a ficheros."""
