import io

import pytest

from basicds.array_queue import QueueEmptyError
from basicds.linked_queue import CircularLinkedQueue, LinkedQueue, main


def _both():
    return [LinkedQueue(), CircularLinkedQueue()]


def test_peek_and_dequeue_follow_insertion():
    for queue in _both():
        for value in [5, 6, 7]:
            queue.enqueue(value)
        assert queue.peek() == 5
        assert queue.dequeue() == 5
        assert list(queue) == [6, 7]
        assert repr(queue) == f"{type(queue).__name__}([6, 7])"


def test_empty_errors():
    for queue in _both():
        with pytest.raises(QueueEmptyError):
            queue.dequeue()
        with pytest.raises(QueueEmptyError):
            queue.peek()


def test_single_element_round_trip():
    for queue in _both():
        queue.enqueue(42)
        assert queue.dequeue() == 42
        assert list(queue) == []
        queue.enqueue(43)
        assert queue.peek() == 43
        assert len(queue) == 1


def test_matches_list_model():
    for queue in _both():
        model = [100]
        queue.enqueue(100)
        for step in range(50):
            if step % 4 == 3:
                assert queue.dequeue() == model.pop(0)
            else:
                queue.enqueue(step)
                model.append(step)
            assert list(queue) == model
            assert len(queue) == len(model)


def test_unbounded():
    for queue in _both():
        for value in range(1000):
            queue.enqueue(value)
        assert list(queue) == list(range(1000))


@pytest.mark.parametrize(
    "argv, script, expected",
    [
        ([], "1\n12\n1\n13\n4\n2\n3\n5\n", ["12  13", "12 is dequeued", "13 is the front element"]),
        (
            ["--circular"],
            "1\n9\n2\n2\n9\n5\n",
            ["9 is enqueued", "9 is dequeued", "QUEUE is EMPTY!!", "Invalid choice!!"],
        ),
    ],
)
def test_menu_session(monkeypatch, capsys, argv, script, expected):
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main(argv) == 0
    printed = capsys.readouterr().out
    assert [text for text in expected if text not in printed] == []