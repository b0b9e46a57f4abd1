from dataclasses import fields
from functools import reduce
from typing import Callable, Optional, Tuple, Type, TypeVar

from .domain import AppState
from .reducers import auth_reducer, cart_reducer, catalog_reducer

S = TypeVar("S")


def pipe(*funcs):
    """pipe(f, g, h)(x) == h(g(f(x)))"""
    return reduce(lambda f, g: lambda x: g(f(x)), funcs)


# ============ Композиция редьюсеров ============


def combine_reducers(
    state_cls: Type[S], **reducers: Callable
) -> Callable[[Optional[S], object], S]:
    """
    Собирает корневой редьюсер из редьюсеров срезов.
    Каждый редьюсер видит только свой срез, ключи задаёт state_cls.

    state=None -> каждый срез строится из своего значения по умолчанию
    """
    expected = {f.name for f in fields(state_cls)}
    if set(reducers) != expected:
        raise ValueError(
            f"Reducer keys {sorted(reducers)} do not match {state_cls.__name__} fields {sorted(expected)}"
        )

    slices = tuple(reducers.items())

    def combined(state: Optional[S], action: object) -> S:
        return state_cls(
            **{
                key: reducer(None if state is None else getattr(state, key), action)
                for key, reducer in slices
            }
        )

    return combined


root_reducer = combine_reducers(
    AppState,
    auth=auth_reducer,
    products=catalog_reducer,
    cart=cart_reducer,
)


def changed_keys(prev: Optional[S], new: S) -> Tuple[str, ...]:
    """Срезы, сменившие идентичность (для пропуска лишней перерисовки)"""
    if prev is None:
        return tuple(f.name for f in fields(new))
    return tuple(
        f.name
        for f in fields(new)
        if getattr(prev, f.name) is not getattr(new, f.name)
    )
