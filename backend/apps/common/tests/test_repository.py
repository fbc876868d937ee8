from dataclasses import dataclass

from apps.common.repository import InMemoryRepository


@dataclass
class Row:
    id: str
    kind: str


def test_save_get_and_insertion_order():
    repo = InMemoryRepository(key=lambda r: r.id, items=[Row('b', 'x'), Row('a', 'y')])
    assert [r.id for r in repo.list()] == ['b', 'a']
    assert repo.get('a').kind == 'y'
    repo.save(Row('b', 'z'))
    assert [r.kind for r in repo.list()] == ['z', 'y']
    assert len(repo) == 2


def test_list_filters_by_attribute():
    repo = InMemoryRepository(key=lambda r: r.id, items=[Row('1', 'x'), Row('2', 'y'), Row('3', 'x')])
    assert [r.id for r in repo.list(kind='x')] == ['1', '3']


def test_ids_are_compared_as_strings():
    repo = InMemoryRepository(key=lambda r: r.id, items=[Row('7', 'x')])
    assert repo.get(7) is not None
    assert repo.delete(7) is True
    assert repo.delete(7) is False
    assert repo.get(None) is None
