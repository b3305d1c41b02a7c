"""Tests for the pure Python Signal/Observable implementation.

Author: Michael Economou
Date: 2026-03-02
"""

from listboard.utils.events import Observable, Signal


class Counter(Observable):
    value_changed = Signal(int)

    def __init__(self):
        super().__init__()
        self.value = 0

    def increment(self):
        self.value += 1
        self.value_changed.emit(self.value)


class TestSignal:
    """Test connect/disconnect/emit."""

    def test_emit_calls_connected_callbacks(self):
        """Test callbacks receive the emitted arguments."""
        counter = Counter()
        received = []
        counter.value_changed.connect(received.append)

        counter.increment()
        counter.increment()

        assert received == [1, 2]

    def test_connect_twice_is_noop(self):
        """Test the same callback is only registered once."""
        counter = Counter()
        received = []
        counter.value_changed.connect(received.append)
        counter.value_changed.connect(received.append)

        counter.increment()

        assert received == [1]
        assert counter.value_changed.receiver_count() == 1

    def test_disconnect(self):
        """Test disconnecting one or all callbacks."""
        counter = Counter()
        first, second = [], []
        counter.value_changed.connect(first.append)
        counter.value_changed.connect(second.append)

        counter.value_changed.disconnect(first.append)
        counter.increment()
        counter.value_changed.disconnect()
        counter.increment()

        assert first == []
        assert second == [1]

    def test_class_attribute_is_descriptor(self):
        """Test accessing the signal on the class returns the descriptor."""
        assert isinstance(Counter.value_changed, Signal)
        assert Counter.value_changed.name == "value_changed"
