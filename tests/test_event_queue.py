import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.simulation.event_queue import EventRecorder, EventType, FIFOEventQueue, TreeEvent

def test_recorder_sequence_and_filters():
    print("--- Iniciando Teste do Gravador de Eventos ---")

    recorder = EventRecorder()
    recorder(EventType.VISIT, "Check 50", value=50)
    recorder(EventType.ROTATE_LEFT, "Left rotation", "Rotação à esquerda em 10", 10)
    recorder(EventType.VISIT, "Check 30", value=30)

    events = recorder.events()
    print(f"Eventos: {events}")
    assert [e.sequence for e in events] == [0, 1, 2]
    assert recorder.count() == 3
    assert recorder.count(EventType.VISIT) == 2
    assert [e.value for e in recorder.by_type(EventType.VISIT)] == [50, 30]
    assert recorder.get_statistics() == {EventType.VISIT: 2, EventType.ROTATE_LEFT: 1}

    # drain esvazia mas a sequência continua crescendo
    drained = recorder.drain()
    assert len(drained) == 3
    assert recorder.count() == 0
    assert recorder(EventType.FOUND, "Found 30").sequence == 3

    recorder.clear()
    assert recorder(EventType.RESET, "Reset").sequence == 0

def test_events_order_by_sequence():
    late = TreeEvent(5, EventType.FOUND, "Found 1")
    early = TreeEvent(1, EventType.VISIT, "Check 1")
    assert sorted([late, early]) == [early, late]

def test_fifo_replay_order():
    print("--- Teste da Fila FIFO de replay ---")

    queue = FIFOEventQueue()
    assert queue.dequeue() is None

    recorder = EventRecorder()
    queue.enqueue(recorder(EventType.SEARCH, "Search 40"))
    queue.extend([recorder(EventType.VISIT, "Check 50"), recorder(EventType.FOUND, "Found 40")])

    assert queue.size() == 3
    assert queue.peek().label == "Search 40"
    labels = []
    while not queue.is_empty():
        labels.append(queue.dequeue().label)
    assert labels == ["Search 40", "Check 50", "Found 40"]
    print(">> SUCESSO: Ordem de chegada respeitada.")
