"""Core: dominio, configuración e interfaces (sin I/O de red)."""
