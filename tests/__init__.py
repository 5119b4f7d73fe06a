"""
Тесты exactgeo

Содержит:
- tests/unit/          : unit-тесты отдельных модулей
"""
