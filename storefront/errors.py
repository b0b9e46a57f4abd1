"""
Ошибки хранилища.
Ошибки внешнего каталога сюда не относятся: они возвращаются как Either.left
"""


class StoreError(Exception):
    """Базовая ошибка неправильного использования Store"""


class StoreDisposedError(StoreError):
    """Store уже закрыт через dispose()"""


class ReducerDispatchError(StoreError):
    """dispatch вызван изнутри редьюсера"""
