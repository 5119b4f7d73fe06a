"""
Ядро: математические примитивы, доменные модели и геометрические предикаты.

Всё здесь — чистые вычисления над value-типами: без I/O и без общего
изменяемого состояния.
"""
