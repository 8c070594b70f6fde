"""
Unit tests for the hash algorithm registry.
"""

import hashlib
from concurrent.futures import ThreadPoolExecutor

import pytest

from multidigest.core.container import get_container
from multidigest.core.exceptions import (
    AlgorithmConflictError,
    AlgorithmNotFoundError,
    AlgorithmNotImplementedError,
    InvalidArgumentError,
)
from multidigest.hashing.engines import IdentityEngine
from multidigest.hashing.registry import (
    AlgorithmDescriptor,
    HashingAlgorithmRegistry,
    get_default_registry,
)


class TestBuiltins:
    """Tests for the built-in algorithm table."""

    @pytest.mark.parametrize(
        ("name", "code", "size"),
        [
            ("sha1", 0x11, 20),
            ("sha2-256", 0x12, 32),
            ("sha2-512", 0x13, 64),
            ("sha3-512", 0x14, 64),
            ("sha3-224", 0x17, 28),
            ("shake-128", 0x18, 16),
            ("keccak-512", 0x1D, 64),
            ("dbl-sha2-256", 0x56, 32),
            ("blake2b-160", 0xB214, 20),
            ("blake2b-512", 0xB240, 64),
            ("blake2s-256", 0xB260, 32),
        ],
    )
    def test_lookup_by_name_and_code(self, registry, name, code, size):
        """Built-ins resolve by name and by code to the same descriptor."""
        descriptor = registry.by_name(name)
        assert descriptor.code == code
        assert descriptor.digest_size == size
        assert registry.by_code(code) is descriptor

    def test_identity_is_variable_length(self, registry):
        """identity has code 0 and no fixed digest size."""
        identity = registry.by_name("identity")
        assert identity.code == 0
        assert identity.is_variable_length

    def test_id_alias(self, registry):
        """'id' resolves to the identity descriptor."""
        assert registry.by_name("id") is registry.by_name("identity")
        assert "id" in registry
        assert registry.aliases == {"id": "identity"}

    def test_md5_not_registered(self, registry):
        """md5 is not part of the built-in table."""
        assert "md5" not in registry
        with pytest.raises(AlgorithmNotFoundError):
            registry.by_name("md5")

    def test_all_builtins_implemented(self, registry):
        """Every built-in can be computed locally."""
        assert all(d.is_implemented for d in registry.all())
        assert set(registry.available_algorithms) == {d.name for d in registry.all()}

    def test_get_name(self, registry):
        """Codes map back to names."""
        assert registry.get_name(0x13) == "sha2-512"

    def test_empty_registry(self):
        """register_defaults=False starts empty."""
        empty = HashingAlgorithmRegistry(register_defaults=False)
        assert len(empty) == 0
        assert empty.all() == []


class TestLookupFailures:
    """Tests for not-found and argument errors."""

    def test_unknown_code(self, registry):
        """Unknown codes raise a not-found error that is also a KeyError."""
        with pytest.raises(AlgorithmNotFoundError):
            registry.by_code(0xBADBAD)
        with pytest.raises(KeyError):
            registry.get_name(0xBADBAD)

    def test_unknown_name(self, registry):
        """Unknown names raise a not-found error."""
        with pytest.raises(AlgorithmNotFoundError) as exc_info:
            registry.by_name("unknown")
        assert exc_info.value.context["name"] == "unknown"

    @pytest.mark.parametrize("name", ["", None])
    def test_empty_name(self, registry, name):
        """Empty or missing names are an argument error."""
        with pytest.raises(InvalidArgumentError):
            registry.by_name(name)

    def test_get_returns_none(self, registry):
        """get() and get_by_code() return None instead of raising."""
        assert registry.get("unknown") is None
        assert registry.get_by_code(0xBADBAD) is None


class TestRegister:
    """Tests for runtime registration."""

    def test_register_and_lookup(self, registry):
        """A new algorithm is resolvable by name, code and in all()."""
        descriptor = registry.register("my-hash", 0x300001, 32)
        assert registry.by_name("my-hash") is descriptor
        assert registry.by_code(0x300001) is descriptor
        assert descriptor in registry.all()
        assert not descriptor.is_implemented

    def test_register_with_engine(self, registry):
        """An engine factory makes the algorithm computable."""
        registry.register("my-sha", 0x300002, 32, lambda: _Sha256Engine())
        assert registry.compute_digest("my-sha", b"abc") == hashlib.sha256(b"abc").digest()

    def test_name_conflict_leaves_registry_unchanged(self, registry):
        """Reusing a name fails and does not insert the new code."""
        before = len(registry)
        with pytest.raises(AlgorithmConflictError):
            registry.register("sha1", 0x300003, 20)
        assert len(registry) == before
        assert registry.by_name("sha1").code == 0x11
        with pytest.raises(AlgorithmNotFoundError):
            registry.by_code(0x300003)

    def test_code_conflict_leaves_registry_unchanged(self, registry):
        """Reusing a code fails and does not insert the new name."""
        with pytest.raises(AlgorithmConflictError):
            registry.register("not-sha1", 0x11, 20)
        assert "not-sha1" not in registry
        assert registry.by_code(0x11).name == "sha1"

    def test_name_conflicting_with_alias(self, registry):
        """A name already used as an alias is a conflict."""
        with pytest.raises(AlgorithmConflictError):
            registry.register("id", 0x300004, 4)

    def test_conflict_is_value_error(self, registry):
        """Conflicts are catchable as ValueError."""
        with pytest.raises(ValueError):
            registry.register("sha1", 0x11, 20)

    @pytest.mark.parametrize(
        ("name", "code", "size"),
        [
            ("", 0x300005, 32),
            ("bad-code", -1, 32),
            ("bad-code", 0x1_0000_0000, 32),
            ("bad-size", 0x300005, 0),
        ],
    )
    def test_invalid_arguments(self, registry, name, code, size):
        """Empty names, out-of-range codes and non-positive sizes are rejected."""
        with pytest.raises(InvalidArgumentError):
            registry.register(name, code, size)

    def test_register_alias(self, registry):
        """Aliases resolve to their target."""
        target = registry.register_alias("sha256", "sha2-256")
        assert registry.by_name("sha256") is target

    def test_alias_conflict(self, registry):
        """An alias cannot shadow an existing name."""
        with pytest.raises(AlgorithmConflictError):
            registry.register_alias("sha1", "sha2-256")

    def test_alias_to_unknown_target(self, registry):
        """Aliasing an unregistered algorithm is a not-found error."""
        with pytest.raises(AlgorithmNotFoundError):
            registry.register_alias("nope", "does-not-exist")


class TestDeregister:
    """Tests for deregistration."""

    def test_deregister_descriptor(self, registry):
        """Removing a descriptor frees both its name and code."""
        descriptor = registry.register("temp", 0x300010, 8)
        registry.deregister(descriptor)
        assert "temp" not in registry
        with pytest.raises(AlgorithmNotFoundError):
            registry.by_code(0x300010)
        registry.register("temp", 0x300010, 8)

    def test_deregister_requires_exact_descriptor(self, registry):
        """An equal but separately built descriptor is not the registered one."""
        registry.register("temp", 0x300011, 8)
        with pytest.raises(AlgorithmNotFoundError):
            registry.deregister(AlgorithmDescriptor("temp", 0x300011, 8))
        assert "temp" in registry

    def test_deregister_by_name_and_code(self, registry):
        """Names and codes are accepted as keys."""
        registry.register("by-name", 0x300012, 8)
        registry.register("by-code", 0x300013, 8)
        registry.deregister("by-name")
        registry.deregister(0x300013)
        assert "by-name" not in registry
        assert "by-code" not in registry

    def test_deregister_removes_aliases(self, registry):
        """Aliases go away with their target."""
        registry.deregister("identity")
        assert "id" not in registry
        assert registry.aliases == {}

    def test_deregister_alias_only(self, registry):
        """Removing an alias keeps the algorithm."""
        registry.deregister("id")
        assert "id" not in registry
        assert "identity" in registry

    def test_deregister_unknown(self, registry):
        """Removing something absent is a not-found error."""
        with pytest.raises(AlgorithmNotFoundError):
            registry.deregister("never-registered")
        with pytest.raises(AlgorithmNotFoundError):
            registry.deregister(0xBADBAD)

    def test_all_is_snapshot(self, registry):
        """all() is unaffected by later mutation."""
        snapshot = registry.all()
        registry.register("later", 0x300014, 8)
        assert "later" not in {d.name for d in snapshot}
        assert [d.code for d in snapshot] == sorted(d.code for d in snapshot)


class TestDescriptor:
    """Tests for AlgorithmDescriptor."""

    def test_metadata_only_not_implemented(self):
        """A fixed-size descriptor without a factory cannot create engines."""
        descriptor = AlgorithmDescriptor("meta", 0x300020, 32)
        with pytest.raises(AlgorithmNotImplementedError):
            descriptor.create_engine()
        with pytest.raises(NotImplementedError):
            descriptor.create_engine()

    def test_variable_length_without_factory_echoes(self):
        """A variable-length descriptor without a factory gets an identity engine."""
        descriptor = AlgorithmDescriptor("echo", 0x300021, None)
        engine = descriptor.create_engine()
        assert isinstance(engine, IdentityEngine)
        assert engine.compute(b"xyz") == b"xyz"

    def test_equality_ignores_factory(self):
        """Descriptors compare by name, code and size."""
        a = AlgorithmDescriptor("x", 1, 2, IdentityEngine)
        b = AlgorithmDescriptor("x", 1, 2)
        assert a == b
        assert hash(a) == hash(b)

    def test_str_is_name(self):
        """str() of a descriptor is its name."""
        assert str(AlgorithmDescriptor("x", 1, 2)) == "x"

    def test_registry_create_engine_not_implemented(self, registry):
        """The registry surfaces not-implemented for metadata-only algorithms."""
        registry.register("not-implemented", 0x0F, 32)
        with pytest.raises(AlgorithmNotImplementedError):
            registry.create_engine("not-implemented")


class TestDefaultRegistry:
    """Tests for the process-wide default registry."""

    def test_singleton(self):
        """Repeated calls return the same instance."""
        assert get_default_registry() is get_default_registry()

    def test_container_override(self):
        """A registry registered in the container takes precedence."""
        custom = HashingAlgorithmRegistry(register_defaults=False)
        get_container().register_singleton(HashingAlgorithmRegistry, implementation=custom)
        assert get_default_registry() is custom


class TestConcurrency:
    """Smoke test for concurrent reads during mutation."""

    def test_reads_during_registration(self, registry):
        """Lookups stay consistent while other threads register and deregister."""

        def reader(_):
            for _ in range(200):
                assert registry.by_name("sha2-256").code == 0x12
                assert registry.by_code(0x11).name == "sha1"

        def writer(n):
            for i in range(50):
                code = 0x310000 + n * 1000 + i
                descriptor = registry.register(f"w{n}-{i}", code, 16)
                assert registry.by_code(code) is descriptor
                registry.deregister(descriptor)

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(reader, n) for n in range(4)]
            futures += [pool.submit(writer, n) for n in range(4)]
            for future in futures:
                future.result()

        assert all(not d.name.startswith("w") for d in registry.all())


class _Sha256Engine(IdentityEngine):
    """Test engine: buffers input, returns SHA-256 of it."""

    def finish(self) -> bytes:
        return hashlib.sha256(super().finish()).digest()
