"""Stateful property-based tests using Hypothesis for workflow testing.

This module uses Hypothesis's RuleBasedStateMachine to exercise the
pipeline builder and composite validator across arbitrary sequences of
add/remove/run steps.
"""

from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import HealthCheck, settings
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from baubit_validation import (
    BaseValidator,
    CompositeValidator,
    LengthValidator,
    NonEmptyStringValidator,
    RegexValidator,
    ValidatorPipelineBuilder,
)

MEMBER_FACTORIES = {
    "non_empty": NonEmptyStringValidator,
    "length": lambda: LengthValidator(max_length=4),
    "regex": lambda: RegexValidator(r"[a-z]*"),
}

SAMPLE_VALUES = ["", "abc", "ABC", "abcdefgh", "ab1", None]


# =============================================================================
# CompositeValidator State Machine
# =============================================================================


class CompositeValidatorStateMachine(RuleBasedStateMachine):
    """State machine for CompositeValidator membership changes.

    Keeps a shadow list of members and checks that the composite always
    agrees with running those members one by one.
    """

    def __init__(self) -> None:
        super().__init__()
        self.composite: CompositeValidator = CompositeValidator()
        self.members: list[BaseValidator] = []

    @rule(kind=st.sampled_from(sorted(MEMBER_FACTORIES)))
    def add_member(self, kind: str) -> None:
        validator = MEMBER_FACTORIES[kind]()
        self.composite.add_validator(validator)
        self.members.append(validator)

    @rule(kind=st.sampled_from(sorted(MEMBER_FACTORIES)))
    def remove_member(self, kind: str) -> None:
        removed = self.composite.remove_validator(kind)
        shadow = next((m for m in self.members if m.name == kind), None)
        assert removed == (shadow is not None)
        if shadow is not None:
            self.members.remove(shadow)

    @rule(value=st.sampled_from(SAMPLE_VALUES))
    def run_value(self, value: str | None) -> None:
        combined = self.composite.run(value)
        expected = []
        for member in self.members:
            expected.extend(member.run(value).codes)
        assert combined.codes == expected
        assert combined.is_valid == (not expected)

    @invariant()
    def names_match(self) -> None:
        assert [v.name for v in self.composite.validators] == [m.name for m in self.members]


TestCompositeValidatorStateMachine = CompositeValidatorStateMachine.TestCase
TestCompositeValidatorStateMachine.settings = settings(
    max_examples=50,
    stateful_step_count=20,
    suppress_health_check=[HealthCheck.too_slow],
)


# =============================================================================
# ValidatorPipelineBuilder State Machine
# =============================================================================


class PipelineBuilderStateMachine(RuleBasedStateMachine):
    """State machine for the fluent pipeline builder."""

    def __init__(self) -> None:
        super().__init__()
        self.builder: ValidatorPipelineBuilder = ValidatorPipelineBuilder("machine")
        self.kinds: list[str] = []
        self.fail_fast = False

    @rule(kind=st.sampled_from(sorted(MEMBER_FACTORIES)), condition=st.booleans())
    def add_if(self, kind: str, condition: bool) -> None:
        self.builder.add_if(condition, MEMBER_FACTORIES[kind]())
        if condition:
            self.kinds.append(kind)

    @rule(enabled=st.booleans())
    def toggle_fail_fast(self, enabled: bool) -> None:
        self.builder.fail_fast(enabled)
        self.fail_fast = enabled

    @rule(value=st.sampled_from(SAMPLE_VALUES))
    def build_and_run(self, value: str | None) -> None:
        built = self.builder.build()
        assert built.name == "machine"
        assert built.fail_fast == self.fail_fast
        assert [v.name for v in built.validators] == self.kinds

        result = built.run(value)
        if self.fail_fast:
            assert len(result.errors) <= 1
        if not self.kinds:
            assert result.is_valid


TestPipelineBuilderStateMachine = PipelineBuilderStateMachine.TestCase
TestPipelineBuilderStateMachine.settings = settings(
    max_examples=50,
    stateful_step_count=20,
    suppress_health_check=[HealthCheck.too_slow],
)
