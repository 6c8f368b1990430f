"""Tests for SignatureResolver.

SignatureResolver is the plain upstream: exact names, declared types,
no conversion.
"""

from __future__ import annotations

from callsite_core import MethodRef, SignatureResolver, overloaded


class Animal:
    pass


class Dog(Animal):
    pass


class Kennel:
    def admit(self, animal: Animal) -> str:
        return "animal"

    def label(self, text: str, times: int = 1) -> str:
        return text * times


class Vet:
    @overloaded
    def treat(self, animal: Animal) -> str:
        return "animal"

    @overloaded
    def treat(self, dog: Dog) -> str:
        return "dog"

    @overloaded
    def check(self, value: int) -> str:
        return "int"

    @overloaded
    def check(self, value: object) -> str:
        return "object"


class TestSignatureResolver:
    """Tests for SignatureResolver.resolve()."""

    def test_name_and_priority(self):
        """Test the resolver identifies itself as the inferential baseline."""
        resolver = SignatureResolver()

        assert resolver.name == "signature"
        assert resolver.priority == 100

    def test_exact_match(self):
        """Test an argument of the declared type resolves."""
        ref = SignatureResolver().resolve(Kennel(), "admit", [Animal()])

        assert isinstance(ref, MethodRef)
        assert ref.method_name == "admit"
        assert ref.invoke(Kennel(), [Animal()]) == "animal"

    def test_subclass_argument(self):
        """Test a subclass instance satisfies the declared type."""
        assert SignatureResolver().resolve(Kennel(), "admit", [Dog()]) is not None

    def test_mismatched_type(self):
        """Test a wrong argument type is not applicable."""
        assert SignatureResolver().resolve(Kennel(), "admit", ["rex"]) is None

    def test_case_sensitive(self):
        """Test names must match exactly."""
        assert SignatureResolver().resolve(Kennel(), "ADMIT", [Animal()]) is None

    def test_default_parameters(self):
        """Test optional trailing parameters may be omitted."""
        resolver = SignatureResolver()

        one = resolver.resolve(Kennel(), "label", ["ab"])
        two = resolver.resolve(Kennel(), "label", ["ab", 2])

        assert one.invoke(Kennel(), ["ab"]) == "ab"
        assert two.invoke(Kennel(), ["ab", 2]) == "abab"

    def test_none_argument(self):
        """Test None is applicable to any parameter type."""
        assert SignatureResolver().resolve(Kennel(), "admit", [None]) is not None

    def test_most_specific_overload(self):
        """Test the most specific applicable variant wins regardless of order."""
        resolver = SignatureResolver()

        assert resolver.resolve(Vet(), "treat", [Dog()]).invoke(Vet(), [Dog()]) == "dog"
        assert resolver.resolve(Vet(), "treat", [Animal()]).invoke(Vet(), [Animal()]) == "animal"

    def test_most_specific_int_over_object(self):
        """Test int is preferred over object for an int argument."""
        ref = SignatureResolver().resolve(Vet(), "check", [3])

        assert ref.parameter_types == (int,)

    def test_none_argument_prefers_most_specific(self):
        """Test a None argument still selects the most specific variant."""
        ref = SignatureResolver().resolve(Vet(), "check", [None])

        assert ref.parameter_types == (int,)

    def test_can_resolve(self):
        """Test can_resolve checks for an exact-name method."""
        resolver = SignatureResolver()

        assert resolver.can_resolve(Kennel(), "admit")
        assert not resolver.can_resolve(Kennel(), "Admit")
        assert not resolver.can_resolve(Kennel(), "release")
