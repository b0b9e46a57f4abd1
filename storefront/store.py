import logging
import threading
from typing import Callable, List, Optional, Tuple

from .actions import Action, StoreInit, action_kind
from .compose import changed_keys, root_reducer
from .domain import AppState
from .errors import ReducerDispatchError, StoreDisposedError

logger = logging.getLogger(__name__)

Listener = Callable[[], None]
Reducer = Callable[[Optional[AppState], object], AppState]


class Store:
    """
    Единственный изменяемый держатель состояния.

    dispatch: state = reducer(state, action), затем уведомление подписчиков.
    Состояние не мутируется, а заменяется новым объектом.
    Подписчики - функции без аргументов, данные читают через get_state()
    """

    def __init__(
        self, reducer: Reducer = root_reducer, initial_state: Optional[AppState] = None
    ):
        self._reducer = reducer
        self._listeners: List[Listener] = []
        self._lock = threading.RLock()
        self._is_reducing = False
        self._disposed = False

        if initial_state is None:
            # Каждый срез отдаёт своё значение по умолчанию
            initial_state = reducer(None, StoreInit())
        self._state = initial_state

    # ============ Чтение ============

    def get_state(self) -> AppState:
        return self._state

    @property
    def disposed(self) -> bool:
        return self._disposed

    # ============ Запись ============

    def dispatch(self, action: Action) -> Action:
        """
        Синхронно применяет действие и уведомляет подписчиков до возврата.
        Если редьюсер упал, состояние остаётся прежним, подписчики не вызываются
        """
        with self._lock:
            if self._disposed:
                raise StoreDisposedError("Cannot dispatch to a disposed store")
            if self._is_reducing:
                raise ReducerDispatchError("Reducers may not dispatch actions")

            self._is_reducing = True
            try:
                new_state = self._reducer(self._state, action)
            finally:
                self._is_reducing = False

            self._state = new_state
            # Снимок: подписка/отписка внутри колбэка действует со следующего dispatch
            listeners = tuple(self._listeners)

        logger.debug(
            "dispatch %s -> %d subscriber(s)", action_kind(action), len(listeners)
        )

        for listener in listeners:
            listener()

        return action

    # ============ Подписка ============

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Регистрирует подписчика, возвращает функцию отписки (идемпотентную)"""
        if not callable(listener):
            raise TypeError("Expected the listener to be a function")

        with self._lock:
            if self._disposed:
                raise StoreDisposedError("Cannot subscribe to a disposed store")
            self._listeners.append(listener)

        subscribed = True

        def unsubscribe() -> None:
            nonlocal subscribed
            if not subscribed:
                return
            subscribed = False
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # ============ Жизненный цикл ============

    def dispose(self) -> None:
        """Закрывает хранилище: подписчики удаляются, dispatch/subscribe запрещены"""
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            self._listeners.clear()
        logger.debug("store disposed")


def create_store(
    reducer: Reducer = root_reducer, initial_state: Optional[AppState] = None
) -> Store:
    """Создаёт новый Store (глобального экземпляра нет, передавайте явно)"""
    return Store(reducer=reducer, initial_state=initial_state)


def observe(
    store: Store, on_change: Callable[[Tuple[str, ...]], None]
) -> Callable[[], None]:
    """
    Подписка с именами изменившихся срезов.
    on_change не вызывается, если ни один срез не сменил идентичность
    """
    previous = [store.get_state()]

    def listener() -> None:
        current = store.get_state()
        keys = changed_keys(previous[0], current)
        previous[0] = current
        if keys:
            on_change(keys)

    return store.subscribe(listener)
