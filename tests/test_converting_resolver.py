"""Tests for the argument-converting resolver.

Covers pass-through of exact-arity upstream answers, conversion when
upstream finds nothing or an off-arity method, case-insensitive names,
fallback when no candidate converts, lazy registry acquisition, and
resolution events.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any

import pytest

from callsite_core import (
    ArgumentConvertingResolver,
    BaseResolver,
    CallableRef,
    ConversionError,
    ConversionRegistry,
    ConvertingCallable,
    EventNames,
    MethodRef,
    ResolverChain,
    SignatureResolver,
    find_methods,
    overloaded,
)

# =============================================================================
# Test Targets and Resolvers
# =============================================================================


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


class Painter:
    """Exposes apply(Color) only."""

    def apply(self, color: Color) -> str:
        return f"applied:{color.name}"


class Widget:
    """Exposes a camelCase setter and a two-argument method."""

    def setValue(self, value: str) -> str:
        return f"value:{value}"

    def resize(self, width: int, height: int) -> tuple[int, int]:
        return (width, height)


class Mixer:
    """Overloaded mix(int) / mix(Color), plus a two-argument blend."""

    @overloaded
    def mix(self, amount: int) -> str:
        return f"int:{amount}"

    @overloaded
    def mix(self, color: Color) -> str:
        return f"color:{color.name}"

    def blend(self, first: int, second: int) -> int:
        return first + second


class Gauge:
    """Overloaded set(float) / set(str)."""

    @overloaded
    def set(self, level: float) -> str:
        return f"level:{level}"

    @overloaded
    def set(self, label: str) -> str:
        return f"label:{len(label)}"


class Collector:
    """Varargs method: declares no positional parameters."""

    def gather(self, *items: str) -> tuple[str, ...]:
        return items


class RecordingResolver(BaseResolver):
    """Delegates to another resolver and records every lookup."""

    def __init__(self, inner: BaseResolver) -> None:
        self._inner = inner
        self.calls: list[tuple[str, list[Any]]] = []

    @property
    def name(self) -> str:
        return "recording"

    @property
    def priority(self) -> int:
        return 1

    def resolve(self, target: Any, method_name: str, args: Sequence[Any]) -> CallableRef | None:
        self.calls.append((method_name, list(args)))
        return self._inner.resolve(target, method_name, args)


class ScriptedResolver(BaseResolver):
    """Returns pre-arranged answers in order, then None."""

    def __init__(self, *answers: CallableRef | None) -> None:
        self._answers = list(answers)
        self.calls: list[tuple[str, list[Any]]] = []

    @property
    def name(self) -> str:
        return "scripted"

    @property
    def priority(self) -> int:
        return 1

    def resolve(self, target: Any, method_name: str, args: Sequence[Any]) -> CallableRef | None:
        self.calls.append((method_name, list(args)))
        return self._answers.pop(0) if self._answers else None


def method_ref(cls: type, name: str, arity: int, index: int = 0) -> MethodRef:
    return MethodRef(find_methods(cls, name, arity)[index])


@pytest.fixture
def resolver(registry: ConversionRegistry) -> ArgumentConvertingResolver:
    return ArgumentConvertingResolver(ResolverChain.default(), registry)


# =============================================================================
# Pass-through Tests
# =============================================================================


class TestPassThrough:
    """Exact-arity upstream answers are trusted as-is."""

    def test_exact_arity_match_returned_unchanged(self, registry):
        """Test the very same reference object is returned."""
        upstream_ref = method_ref(Painter, "apply", 1)
        upstream = ScriptedResolver(upstream_ref)
        resolver = ArgumentConvertingResolver(upstream, registry)

        result = resolver.resolve(Painter(), "apply", ["RED"])

        assert result is upstream_ref
        assert len(upstream.calls) == 1

    def test_exact_arity_match_ignores_registry_state(self):
        """Test pass-through also holds without a registry."""
        upstream_ref = method_ref(Painter, "apply", 1)
        resolver = ArgumentConvertingResolver(ScriptedResolver(upstream_ref))

        assert resolver.resolve(Painter(), "apply", ["RED"]) is upstream_ref

    def test_real_chain_match_not_wrapped(self, resolver):
        """Test arguments that already fit are not wrapped for conversion."""
        result = resolver.resolve(Painter(), "apply", [Color.BLUE])

        assert isinstance(result, MethodRef)
        assert result.invoke(Painter(), [Color.BLUE]) == "applied:BLUE"

    def test_no_registry_returns_upstream_answer(self):
        """Test the layer is a no-op until its registry is ready."""
        resolver = ArgumentConvertingResolver(ResolverChain.default())

        assert resolver.is_ready is False
        assert resolver.resolve(Painter(), "apply", ["RED"]) is None

    def test_set_registry_enables_conversion(self, registry):
        """Test a registry set later activates the layer."""
        resolver = ArgumentConvertingResolver(ResolverChain.default())
        resolver.set_registry(registry)

        assert resolver.is_ready is True
        assert isinstance(resolver.resolve(Painter(), "apply", ["RED"]), ConvertingCallable)


# =============================================================================
# Conversion Tests
# =============================================================================


class TestConversion:
    """Coercion when upstream finds nothing or an off-arity method."""

    def test_scenario_enum_by_name(self, registry):
        """Test apply(Color) is reached with a string and re-converted per call."""
        upstream = RecordingResolver(ResolverChain.default())
        resolver = ArgumentConvertingResolver(upstream, registry)
        painter = Painter()

        ref = resolver.resolve(painter, "apply", ["RED"])

        assert isinstance(ref, ConvertingCallable)
        assert upstream.calls == [("apply", ["RED"]), ("apply", [Color.RED])]
        assert ref.invoke(painter, ["RED"]) == "applied:RED"
        assert ref.invoke(painter, ["GREEN"]) == "applied:GREEN"

    def test_off_arity_upstream_answer_triggers_conversion(self, registry):
        """Test an upstream pick with the wrong arity is double-checked."""
        wrong_arity = method_ref(Mixer, "blend", 2)
        color_variant = method_ref(Mixer, "mix", 1, index=1)
        upstream = ScriptedResolver(wrong_arity, color_variant)
        resolver = ArgumentConvertingResolver(upstream, registry)

        result = resolver.resolve(Mixer(), "mix", ["GREEN"])

        assert isinstance(result, ConvertingCallable)
        assert result.unwrap() is color_variant
        assert upstream.calls[1] == ("mix", [Color.GREEN])
        assert result.invoke(Mixer(), ["GREEN"]) == "color:GREEN"

    def test_overflowing_candidate_skipped(self, resolver):
        """Test a converter overflow rejects the candidate instead of escaping."""
        gauge = Gauge()

        result = resolver.resolve(gauge, "set", [10**400])

        assert isinstance(result, ConvertingCallable)
        assert result.parameter_types == (str,)
        assert result.invoke(gauge, [10**400]) == "label:401"

    def test_failed_candidate_skipped(self, resolver):
        """Test mix(int) is skipped when the argument only converts to Color."""
        result = resolver.resolve(Mixer(), "mix", ["BLUE"])

        assert isinstance(result, ConvertingCallable)
        assert result.parameter_types == (Color,)
        assert result.invoke(Mixer(), ["BLUE"]) == "color:BLUE"

    def test_first_declared_candidate_wins(self, resolver):
        """Test a value convertible for both overloads picks the first declared."""
        result = resolver.resolve(Mixer(), "mix", ["2"])

        assert result.parameter_types == (int,)
        assert result.invoke(Mixer(), ["2"]) == "int:2"

    def test_multiple_arguments_converted(self, resolver):
        """Test each mismatching argument is converted."""
        widget = Widget()
        result = resolver.resolve(widget, "resize", ["640", 480])

        assert result.invoke(widget, ["640", "480"]) == (640, 480)

    def test_none_arguments_pass_through(self, resolver):
        """Test None satisfies any parameter without conversion."""
        result = resolver.resolve(Painter(), "apply", [None])

        assert isinstance(result, MethodRef)


class TestCaseInsensitiveNames:
    """Call-site names match methods case-insensitively."""

    def test_upper_case_name_resolves(self, resolver):
        """Test SETVALUE resolves like setValue."""
        widget = Widget()

        upper = resolver.resolve(widget, "SETVALUE", ["x"])
        exact = resolver.resolve(widget, "setValue", ["x"])

        assert upper is not None
        assert exact is not None
        assert upper.method_name == exact.method_name == "setValue"
        assert upper.invoke(widget, ["x"]) == exact.invoke(widget, ["x"]) == "value:x"

    def test_lower_case_name_with_conversion(self, resolver):
        """Test case-insensitive name and enum conversion combine."""
        assert resolver.resolve(Painter(), "APPLY", ["red"]).invoke(Painter(), ["red"]) == (
            "applied:RED"
        )


# =============================================================================
# Fallback Tests
# =============================================================================


class TestFallback:
    """The upstream answer is returned when conversion does not help."""

    def test_no_convertible_candidate_returns_none(self, resolver):
        """Test an unconvertible value leaves the None answer in place."""
        assert resolver.resolve(Painter(), "apply", ["PURPLE"]) is None

    def test_no_convertible_candidate_returns_initial_ref(self, registry):
        """Test an off-arity upstream answer survives a failed search."""
        wrong_arity = method_ref(Mixer, "blend", 2)
        upstream = ScriptedResolver(wrong_arity)
        resolver = ArgumentConvertingResolver(upstream, registry)

        assert resolver.resolve(Painter(), "apply", ["PURPLE"]) is wrong_arity
        assert len(upstream.calls) == 1

    def test_no_same_arity_candidate(self, resolver):
        """Test a method name with no matching arity falls back."""
        assert resolver.resolve(Painter(), "apply", ["RED", "GREEN"]) is None

    def test_unknown_method(self, resolver):
        """Test an unknown name resolves to None."""
        assert resolver.resolve(Painter(), "erase", []) is None

    def test_upstream_rejects_converted_arguments(self, registry):
        """Test the initial answer is kept when the re-lookup fails."""
        wrong_arity = method_ref(Mixer, "blend", 2)
        upstream = ScriptedResolver(wrong_arity, None)
        resolver = ArgumentConvertingResolver(upstream, registry)

        assert resolver.resolve(Painter(), "apply", ["RED"]) is wrong_arity
        assert len(upstream.calls) == 2

    def test_varargs_answer_kept(self, resolver):
        """Test a varargs method picked upstream is kept when no same-arity method exists."""
        collector = Collector()
        result = resolver.resolve(collector, "gather", ["a", "b"])

        assert isinstance(result, MethodRef)
        assert result.invoke(collector, ["a", "b"]) == ("a", "b")


# =============================================================================
# Invocation and Idempotence Tests
# =============================================================================


class TestInvocation:
    """Behaviour of references returned by the resolver."""

    def test_each_invoke_converts_independently(self, resolver):
        """Test two invocations with different values do not interfere."""
        painter = Painter()
        ref = resolver.resolve(painter, "apply", ["RED"])
        first_args = ["GREEN"]
        second_args = ["blue"]

        assert ref.invoke(painter, first_args) == "applied:GREEN"
        assert ref.invoke(painter, second_args) == "applied:BLUE"
        assert first_args == ["GREEN"]
        assert second_args == ["blue"]

    def test_invoke_conversion_error_propagates(self, resolver):
        """Test an unconvertible value at call time is a call-site error."""
        ref = resolver.resolve(Painter(), "apply", ["RED"])

        with pytest.raises(ConversionError):
            ref.invoke(Painter(), ["PURPLE"])

    def test_caller_arguments_not_mutated(self, resolver):
        """Test resolution never modifies the argument list it was given."""
        args = ["640", "480"]
        resolver.resolve(Widget(), "resize", args)

        assert args == ["640", "480"]

    def test_repeated_resolution_is_equivalent(self, resolver):
        """Test identical lookups yield equivalent references."""
        first = resolver.resolve(Painter(), "apply", ["RED"])
        second = resolver.resolve(Painter(), "apply", ["GREEN"])

        assert isinstance(first, ConvertingCallable)
        assert isinstance(second, ConvertingCallable)
        assert first.unwrap() == second.unwrap()
        assert first.invoke(Painter(), ["RED"]) == second.invoke(Painter(), ["RED"])


# =============================================================================
# Registry Acquisition Tests
# =============================================================================


class TestBindComponents:
    """Lazy registry lookup through the ComponentManager."""

    def test_bind_acquires_registry(self, component_manager, registry):
        """Test a registered registry is picked up."""
        component_manager.register_component(ConversionRegistry, registry)
        resolver = ArgumentConvertingResolver(ResolverChain.default())

        assert resolver.bind_components(component_manager) is True
        assert resolver.registry is registry

    def test_bind_failure_degrades_to_pass_through(self, component_manager):
        """Test a missing registry leaves the resolver a pass-through."""
        resolver = ArgumentConvertingResolver(ResolverChain.default())

        assert resolver.bind_components(component_manager) is False
        assert resolver.is_ready is False
        assert resolver.resolve(Painter(), "apply", ["RED"]) is None

    def test_bind_failure_warns_once(self, component_manager, caplog):
        """Test the lookup failure is logged as a single warning."""
        resolver = ArgumentConvertingResolver(ResolverChain.default())

        with caplog.at_level(logging.WARNING, logger="callsite_core"):
            resolver.bind_components(component_manager)
            resolver.bind_components(component_manager)

        warnings = [r for r in caplog.records if "Failed to initialize" in r.getMessage()]
        assert len(warnings) == 1
        assert warnings[0].levelno == logging.WARNING


# =============================================================================
# Event Tests
# =============================================================================


class TestResolutionEvents:
    """Resolution decisions are published on the EventBridge."""

    def test_converted_event(self, registry, event_bridge):
        """Test a successful conversion publishes the converted arguments."""
        received = []
        event_bridge.subscribe(
            EventNames.ARGUMENTS_CONVERTED,
            lambda target_type, name, args, converted: received.append(
                (target_type, name, args, converted)
            ),
        )
        resolver = ArgumentConvertingResolver(
            ResolverChain.default(), registry, events=event_bridge
        )

        resolver.resolve(Painter(), "apply", ["RED"])

        assert received == [(Painter, "apply", ("RED",), (Color.RED,))]

    def test_rejected_and_fallback_events(self, registry, event_bridge):
        """Test rejected candidates and fallbacks are published."""
        rejected = []
        fallbacks = []
        event_bridge.subscribe(
            EventNames.CANDIDATE_REJECTED,
            lambda target_type, candidate, error: rejected.append(candidate.name),
        )
        event_bridge.subscribe(
            EventNames.RESOLUTION_FALLBACK,
            lambda target_type, name, ref, reason: fallbacks.append(reason),
        )
        resolver = ArgumentConvertingResolver(
            ResolverChain.default(), registry, events=event_bridge
        )

        assert resolver.resolve(Painter(), "apply", ["PURPLE"]) is None
        assert rejected == ["apply"]
        assert fallbacks == ["no_convertible_candidate"]


class TestNesting:
    """The converting link composes with other resolvers."""

    def test_inside_resolver_chain(self, registry):
        """Test a converting link can itself be a member of a chain."""
        chain = ResolverChain(name="outer")
        chain.add_resolver(ArgumentConvertingResolver(SignatureResolver(), registry))

        ref = chain.resolve(Painter(), "apply", ["GREEN"])

        assert isinstance(ref, ConvertingCallable)
        assert ref.invoke(Painter(), ["GREEN"]) == "applied:GREEN"

    def test_repr(self, resolver):
        """Test repr shows upstream and readiness."""
        assert "ready=True" in repr(resolver)
