"""Implementaciones que violan cada principio, junto a las corregidas.

Nota:
- Cada módulo reproduce la mitad "problema" de los ejemplos de un principio.
- Solo el catálogo de ejemplos debería depender de estas clases.
"""
