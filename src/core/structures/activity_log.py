from typing import List, Optional

class ActivityLog:
    """
    Registro de atividades do visualizador, com tamanho fixo.
    Guarda as últimas `capacity` linhas num buffer circular: a linha mais
    antiga é descartada quando a capacidade é atingida.
    """
    def __init__(self, capacity: int = 10):
        if capacity <= 0:
            raise ValueError("A capacidade do log deve ser maior que zero.")

        self.capacity = capacity
        self.buffer: List[Optional[str]] = [None] * capacity
        self.head = 0        # Onde a próxima linha será escrita
        self.size = 0

    def push(self, message: str):
        """
        Adiciona uma linha. Se cheio, sobrescreve a mais antiga.
        Complexidade: O(1)
        """
        self.buffer[self.head] = message
        self.head = (self.head + 1) % self.capacity
        if self.size < self.capacity:
            self.size += 1

    @property
    def active(self) -> Optional[str]:
        """A linha mais recente (a destacada como atividade atual)."""
        if self.size == 0:
            return None
        return self.buffer[(self.head - 1) % self.capacity]

    def lines(self) -> List[str]:
        """Linhas da mais recente para a mais antiga, como aparecem no painel."""
        return [self.buffer[(self.head - 1 - i) % self.capacity] for i in range(self.size)]

    def clear(self):
        self.buffer = [None] * self.capacity
        self.head = 0
        self.size = 0

    def __len__(self):
        return self.size

    def __repr__(self):
        return f"ActivityLog(size={self.size}/{self.capacity}, active={self.active!r})"
