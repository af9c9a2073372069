"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- El transporte HTTP vive fuera de este repo: aquí solo se fija su forma.
"""
