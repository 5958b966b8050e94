from collections import deque, Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

class EventType:
    INSERT = "INSERT"
    DELETE = "DELETE"
    SEARCH = "SEARCH"
    VISIT = "VISIT"             # Nó examinado durante a busca
    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"
    ROTATE_LEFT = "ROTATE_LEFT"
    ROTATE_RIGHT = "ROTATE_RIGHT"
    REBALANCE = "REBALANCE"     # Caso detectado (LL, RR, LR, RL) antes das rotações
    RESET = "RESET"

@dataclass(order=True)
class TreeEvent:
    """
    Um passo discreto de narração emitido pelo motor AVL.
    @dataclass(order=True) ordena apenas pelo número de sequência.
    """
    sequence: int
    event_type: str = field(compare=False)
    label: str = field(compare=False)                 # Texto curto (ex.: "Left rotation")
    description: str = field(compare=False, default="")
    value: Any = field(compare=False, default=None)   # Chave envolvida no passo

    def __repr__(self):
        return f"[#{self.sequence}] {self.event_type} -> {self.label}"

class EventRecorder:
    """
    Observador que grava a sequência de eventos de uma operação.
    A instância é "chamável" e pode ser passada direto como `observer` da AVLTree.
    """
    def __init__(self):
        self._events: List[TreeEvent] = []
        self._next_sequence = 0

    def __call__(self, event_type: str, label: str, description: str = "", value: Any = None) -> TreeEvent:
        event = TreeEvent(self._next_sequence, event_type, label, description, value)
        self._next_sequence += 1
        self._events.append(event)
        return event

    def events(self) -> List[TreeEvent]:
        return list(self._events)

    def by_type(self, event_type: str) -> List[TreeEvent]:
        return [e for e in self._events if e.event_type == event_type]

    def count(self, event_type: Optional[str] = None) -> int:
        if event_type is None:
            return len(self._events)
        return len(self.by_type(event_type))

    def drain(self) -> List[TreeEvent]:
        """Retorna os eventos gravados e esvazia o gravador (a sequência continua crescendo)."""
        events = self._events
        self._events = []
        return events

    def get_statistics(self) -> Dict[str, int]:
        """Contagem de eventos por tipo."""
        return dict(Counter(e.event_type for e in self._events))

    def clear(self):
        self._events.clear()
        self._next_sequence = 0

class FIFOEventQueue:
    """Fila simples para reproduzir os eventos no ritmo da animação."""
    def __init__(self):
        self._queue = deque()

    def enqueue(self, event: TreeEvent):
        self._queue.append(event)

    def extend(self, events: List[TreeEvent]):
        self._queue.extend(events)

    def dequeue(self) -> Optional[TreeEvent]:
        return self._queue.popleft() if self._queue else None

    def peek(self) -> Optional[TreeEvent]:
        return self._queue[0] if self._queue else None

    def is_empty(self) -> bool:
        return len(self._queue) == 0

    def size(self) -> int:
        return len(self._queue)

    def clear(self):
        self._queue.clear()
