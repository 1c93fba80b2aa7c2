"""Modelos del dominio RPC.

Por qué:
- Aquí viven los shapes (Pydantic v2) y el resultado uniforme de las llamadas.
- El dominio no conoce HTTP ni CLI: solo qué datos entran y salen.
"""
