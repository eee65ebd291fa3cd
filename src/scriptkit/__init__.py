"""
scriptkit — каталог stateless утилит для игровых скриптов.

Math, finance, complex numbers, vectors, numerical methods, geometry,
paradoxes, toy physics, toy ciphers, collections, strings, files, time,
colors и engine glue через capability-интерфейсы.
"""

import logging

__version__ = "0.3.0"

# Библиотека не конфигурирует вывод логов сама
logging.getLogger(__name__).addHandler(logging.NullHandler())
