from edakit.linked import LinkedList, Node, Queue, Stack


def test_source_linked_list_sequence():
    items = LinkedList()
    for value in (1, 3, 5, 15, 5, 17):
        items.insert_first(value)
    assert str(items) == "17 -> 5 -> 15 -> 5 -> 3 -> 1 -> "
    items.remove(5)
    items.remove(17)
    assert str(items) == "15 -> 3 -> 1 -> "
    assert len(items) == 3
    items.clear()
    for value in (2, 12, 2):
        items.insert_last(value)
    assert str(items) == "2 -> 12 -> 2 -> "
    node = items.find(12)
    node.value = 18
    assert str(items) == "2 -> 18 -> 2 -> "


def test_find_missing_returns_none():
    assert LinkedList([1, 2]).find(9) is None


def test_find_returns_node():
    node = LinkedList([4, 5]).find(5)
    assert isinstance(node, Node) and node.value == 5 and node.next is None


def test_remove_first_and_empty():
    items = LinkedList([1, 2])
    items.remove_first()
    assert list(items) == [2]
    items.remove_first()
    items.remove_first()
    assert list(items) == [] and len(items) == 0


def test_remove_all_occurrences_at_head():
    items = LinkedList([7, 7, 1, 7])
    items.remove(7)
    assert list(items) == [1]
    assert len(items) == 1


def test_stack_source_case():
    stack = Stack()
    for value in (0, 10, 20, 30):
        stack.push(value)
    assert len(stack) == 4
    assert stack.top() == 30
    assert stack.pop() == 30
    assert stack.top() == 20


def test_stack_empty():
    stack = Stack([1])
    stack.clear()
    assert stack.is_empty()
    assert stack.pop() is None
    assert stack.top() is None


def test_queue_fifo():
    queue = Queue()
    for value in "abc":
        queue.push(value)
    assert [queue.pop() for _ in range(3)] == ["a", "b", "c"]
    assert queue.is_empty()
    assert queue.pop() is None


def test_queue_top_and_clear():
    queue = Queue([1, 2])
    assert queue.top() == 1 and len(queue) == 2
    queue.clear()
    assert queue.top() is None and len(queue) == 0