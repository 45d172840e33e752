"""
Core: арифметика модулей, модель целого со знаком и контракты.

Не зависит от внешних представлений (строки, numpy и т.д.).
"""
