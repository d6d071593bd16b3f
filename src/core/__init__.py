"""
Core fixed-point math, domain models and contracts.

Чистые детерминированные функции без I/O, без чтения часов и без float.
Внешние системы (фиды, леджеры, governance) находятся за границей ядра.
"""
