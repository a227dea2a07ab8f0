"""Test scenario composition: class members + markup refs → test source.

Data flow per call:
1. parse_members(class_text)  -> SourceClass | ClassNotFound
2. harvest(markup_text)       -> [RefValue] in document order
3. compose()                  -> three TestScenario values, fixed order
4. render_scenario() each and join with a blank line

Every scenario is built as an immutable value; nothing is shared between
calls.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from litmus.config import Settings
from litmus.inference import to_pascal_case
from litmus.markup import harvest
from litmus.members import parse_members
from litmus.models import ClassNotFound, RefValue, SourceClass, TestScenario

DEFAULT_VALUES_TEST = "ShouldInitializeDefaultComponentValues"

_REF_SUFFIX = "Ref"


def expected_variable(ref_value: RefValue) -> str:
    """Name of the expected-value local for one ref attribute.

    ``TitleRef`` + ``data-id`` -> ``expectedTitleDataId``.
    """
    ref = ref_value.ref_name
    if ref.endswith(_REF_SUFFIX):
        ref = ref[: -len(_REF_SUFFIX)]
    return f"expected{ref}{to_pascal_case(ref_value.key)}"


def _member_assertions(
    source: SourceClass | ClassNotFound, assertion: Callable[[str], str]
) -> tuple[str, ...]:
    if isinstance(source, ClassNotFound):
        return (f"// {source.message}",)
    return tuple(assertion(m.name) for m in source.state_members())


def default_values_scenario(
    source: SourceClass | ClassNotFound, component: str, settings: Settings
) -> TestScenario:
    """Fresh instance, no render: every state member starts out null."""
    instance = settings.initial_name(component)
    return TestScenario(
        name=DEFAULT_VALUES_TEST,
        setup=(f"var {instance} = new {component}();",),
        assertions=_member_assertions(source, lambda name: f"{instance}.{name}.Should().BeNull();"),
    )


def render_not_null_scenario(
    source: SourceClass | ClassNotFound, component: str, settings: Settings
) -> TestScenario:
    """After render, every state member has been populated."""
    rendered = settings.rendered_name(component)
    return TestScenario(
        name=f"ShouldRender{component}OnInitialized",
        setup=(f"{rendered} = RenderComponent<{component}>();",),
        assertions=_member_assertions(
            source, lambda name: f"{rendered}.Instance.{name}.Should().NotBeNull();"
        ),
    )


def ref_attributes_scenario(
    ref_values: Sequence[RefValue], component: str, settings: Settings
) -> TestScenario:
    """Markup literals equal the values seen on the referenced elements."""
    rendered = settings.rendered_name(component)
    declarations = []
    assertions = []
    for rv in ref_values:
        var = expected_variable(rv)
        declarations.append(f"{rv.value.type_name} {var} = {rv.value.literal};")
    for rv in ref_values:
        var = expected_variable(rv)
        assertions.append(f"{rendered}.Instance.{rv.ref_name}.{rv.key}.Should().Be({var});")
    return TestScenario(
        name=f"ShouldRender{component}WithStyles",
        setup=tuple(declarations),
        action=(f"{rendered} = RenderComponent<{component}>();",),
        assertions=tuple(assertions),
    )


def compose(
    source: SourceClass | ClassNotFound,
    ref_values: Sequence[RefValue],
    component: str,
    settings: Optional[Settings] = None,
) -> list[TestScenario]:
    """Build the three scenarios: default values, render non-null, ref attributes."""
    settings = settings or Settings()
    return [
        default_values_scenario(source, component, settings),
        render_not_null_scenario(source, component, settings),
        ref_attributes_scenario(ref_values, component, settings),
    ]


def render_scenario(scenario: TestScenario, settings: Optional[Settings] = None) -> str:
    """Render one scenario as a test method, ending in a newline."""
    settings = settings or Settings()
    pad = settings.indent

    def body(lines: Sequence[str]) -> list[str]:
        return [pad + line for line in lines]

    out = [settings.fact_marker, f"public void {scenario.name}()", "{"]
    if scenario.action:
        out.append(pad + "// given")
        out += body(scenario.setup)
        out.append("")
        out.append(pad + "// when")
        out += body(scenario.action)
    else:
        out.append(pad + "// given . when")
        out += body(scenario.setup)
    out.append("")
    out.append(pad + "// then")
    out += body(scenario.assertions)
    out.append("}")
    return "\n".join(out) + "\n"


def generate(
    class_text: str,
    markup_text: str,
    component_name: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Generate the test source for one component.

    Args:
        class_text: C# source of the component class.
        markup_text: Razor template of the component.
        component_name: Class name used in the tests. Defaults to the
            detected class name, or settings.unknown_component.
        settings: Output vocabulary; defaults to Settings().

    Returns:
        The three test methods, separated by blank lines.
    """
    settings = settings or Settings()
    source = parse_members(class_text)
    if component_name is None:
        if isinstance(source, SourceClass):
            component_name = source.name
        else:
            component_name = settings.unknown_component

    scenarios = compose(source, harvest(markup_text), component_name, settings)
    return "\n".join(render_scenario(s, settings) for s in scenarios)
