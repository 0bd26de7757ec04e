"""
Unit tests for the recent colors registry
"""

import threading

import pytest

from color_service.services.color_registry import ColorRegistry


class TestColorRegistryList:
    """Test the bounded recent colors list"""

    def test_starts_empty(self, registry):
        assert registry.list == []
        assert len(registry) == 0

    def test_keeps_push_order(self, registry):
        registry.push("#000001")
        registry.push("#000002")

        assert registry.list == ["#000001", "#000002"]

    def test_pushing_seven_keeps_last_five(self, registry):
        pushed = [f"#00000{i}" for i in range(7)]
        for color in pushed:
            registry.push(color)

        assert registry.list == pushed[-5:]

    def test_push_when_full_evicts_exactly_one(self, registry):
        for i in range(5):
            registry.push(f"#00000{i}")

        registry.push("#ffffff")

        assert len(registry) == 5
        assert registry.list == ["#000001", "#000002", "#000003", "#000004", "#ffffff"]

    def test_list_is_a_snapshot(self, registry):
        registry.push("#123456")

        snapshot = registry.list
        snapshot.append("#abcdef")

        assert registry.list == ["#123456"]

    def test_custom_capacity(self):
        registry = ColorRegistry(capacity=2)
        for color in ("#000001", "#000002", "#000003"):
            registry.push(color)

        assert registry.capacity == 2
        assert registry.list == ["#000002", "#000003"]

    def test_invalid_capacity_raises(self):
        with pytest.raises(ValueError):
            ColorRegistry(capacity=0)

    def test_clear(self, registry):
        registry.push("#123456")

        registry.clear()

        assert registry.list == []

    def test_concurrent_pushes_respect_capacity(self, registry):
        def push_many(offset):
            for i in range(200):
                registry.push(f"#{offset:02x}{i:04x}")

        threads = [threading.Thread(target=push_many, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry.list) == 5


class TestColorRegistryRandom:
    """Test random color generation"""

    def test_random_colors_stay_in_bounds(self, registry):
        for _ in range(1000):
            color = registry.get_random_color()
            assert all(0 <= component <= 255 for component in color.get_components())

    def test_random_color_hex_format(self, registry):
        hex_color = registry.get_random_color().to_hex()

        assert len(hex_color) == 7
        assert hex_color.startswith("#")
