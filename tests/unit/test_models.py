"""Unit tests for backend and storage pool models."""

from orchestrator.models import Protocol, StorageBackend, StoragePool, Volume, VolumeConfig
from orchestrator.storage_attribute import StringOffer


def test_add_storage_pool_sets_owner():
    backend = StorageBackend(name="A", protocol=Protocol.BLOCK)
    pool = backend.add_storage_pool(StoragePool(name="p1"))

    assert pool.backend is backend
    assert backend.get_pools() == [pool]
    assert backend.get_protocol() == Protocol.BLOCK


def test_pools_compare_by_identity():
    first = StoragePool(name="p1", attributes={"tier": StringOffer.of("fast")})
    second = StoragePool(name="p1", attributes={"tier": StringOffer.of("fast")})

    assert first != second
    assert len({first, second}) == 2


def test_storage_class_back_references():
    pool = StoragePool(name="p1")
    pool.add_storage_class("gold")
    pool.add_storage_class("gold")

    assert pool.storage_classes == {"gold"}
    assert pool.remove_storage_class("gold") is True
    assert pool.remove_storage_class("gold") is False


def test_add_volume_records_location():
    backend = StorageBackend(name="A")
    pool = backend.add_storage_pool(StoragePool(name="p1"))
    volume = Volume(config=VolumeConfig(name="vol1", storage_class="gold"))

    pool.add_volume(volume)

    assert pool.volumes == {"vol1": volume}
    assert (volume.backend, volume.pool) == ("A", "p1")
