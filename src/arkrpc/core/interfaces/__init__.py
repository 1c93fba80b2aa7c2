"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) para lo que el caller inyecta en el cliente.
"""
