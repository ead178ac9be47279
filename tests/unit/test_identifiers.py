"""Unit tests for the injectable identifier sources."""

import uuid

import pytest

from curriculo.utils.identifiers import (
    IdGenerator,
    SeededIdGenerator,
    SequentialIdGenerator,
    UUIDGenerator,
)


@pytest.mark.unit
def test_sequential_ids_restart_per_instance():
    first = SequentialIdGenerator()
    assert [first.new_id() for _ in range(3)] == ["id-1", "id-2", "id-3"]
    assert SequentialIdGenerator().new_id() == "id-1"


@pytest.mark.unit
def test_sequential_prefix():
    assert SequentialIdGenerator(prefix="exp").new_id() == "exp-1"


@pytest.mark.unit
def test_seeded_ids_are_reproducible_uuids():
    a, b = SeededIdGenerator(seed=7), SeededIdGenerator(seed=7)
    first = a.new_id()

    assert first == b.new_id()
    assert a.new_id() == b.new_id()
    assert uuid.UUID(first).version == 4
    assert SeededIdGenerator(seed=8).new_id() != first


@pytest.mark.unit
def test_uuid_generator_never_repeats():
    generator = UUIDGenerator()
    ids = {generator.new_id() for _ in range(50)}
    assert len(ids) == 50


@pytest.mark.unit
@pytest.mark.parametrize("generator", [UUIDGenerator(), SequentialIdGenerator(), SeededIdGenerator()])
def test_generators_satisfy_protocol(generator):
    assert isinstance(generator, IdGenerator)
