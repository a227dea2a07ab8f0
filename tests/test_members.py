"""Tests for class member extraction.

Covers class location, member classification, parameter flagging and the
placeholder result for texts without a class.
"""

import pytest

from litmus.members import detect_class_name, parse_members, read_properties
from litmus.models import CLASS_NOT_FOUND, ClassNotFound, SourceClass, Visibility

COUNTER = """
using System.Collections.Generic;
using Microsoft.AspNetCore.Components;

namespace Demo.Components
{
    public partial class Counter : ComponentBase
    {
        [Parameter]
        public string Title { get; set; }

        [CascadingParameter]
        public Theme Theme { get; set; }

        public Label TitleLabel { get; set; }

        private int count { get; set; }

        public int Count => count;

        public string this[int i] => "";

        public string Status;

        public void Increment() => count++;

        public List<string> Items { get; set; } = new() { "a" };
    }
}
"""


@pytest.fixture
def counter() -> SourceClass:
    parsed = parse_members(COUNTER)
    assert isinstance(parsed, SourceClass)
    return parsed


# --- Class location (5 tests) ---

def test_class_name(counter):
    assert counter.name == "Counter"


def test_detect_class_name():
    assert detect_class_name(COUNTER) == "Counter"
    assert detect_class_name("namespace Empty;") is None


def test_only_first_class_is_read():
    text = """
    public class First { public int A { get; set; } }
    public class Second { public int B { get; set; } }
    """
    parsed = parse_members(text)
    assert parsed.name == "First"
    assert [m.name for m in parsed.members] == ["A"]


def test_record_class_and_constraints_are_not_classes():
    text = """
    public record class Point(int X, int Y);
    public interface IRepo<T> where T : class { }
    public class Real { public int Z { get; set; } }
    """
    assert detect_class_name(text) == "Real"


def test_class_keyword_in_comments_and_strings_ignored():
    text = """
    // class Fake { }
    /* class Other { } */
    var s = "class Nope { }";
    public class Real { }
    """
    assert detect_class_name(text) == "Real"


# --- Missing class (2 tests) ---

def test_empty_text_is_class_not_found():
    assert parse_members("") is CLASS_NOT_FOUND


def test_interface_only_is_class_not_found():
    parsed = parse_members("public interface IFoo { int A { get; } }")
    assert isinstance(parsed, ClassNotFound)
    assert parsed.message == "Could not find class declaration."


# --- Member classification (7 tests) ---

def test_public_properties_in_declaration_order(counter):
    assert [m.name for m in counter.members] == ["Title", "Theme", "TitleLabel", "Count", "Items"]


def test_order_index_counts_all_properties(counter):
    # the private `count` property holds index 3
    assert [m.order for m in counter.members] == [0, 1, 2, 4, 5]


def test_read_properties_keeps_private_members():
    parsed = read_properties(COUNTER)
    private = [m for m in parsed.members if not m.is_public]
    assert [(m.name, m.visibility) for m in private] == [("count", Visibility.PRIVATE)]


def test_fields_methods_and_indexers_excluded(counter):
    names = {m.name for m in counter.members}
    assert "Status" not in names
    assert "Increment" not in names
    assert "this" not in names


def test_nested_types_and_events_excluded():
    text = """
    public class Outer
    {
        public class Inner { public int Hidden { get; set; } }
        public enum Mode { A = 1, B }
        public event Action Changed;
        public int Shown { get; set; }
    }
    """
    assert [m.name for m in parse_members(text).members] == ["Shown"]


def test_type_names(counter):
    types = {m.name: m.type_name for m in counter.members}
    assert types["Items"] == "List<string>"
    assert types["Count"] == "int"


def test_tuple_and_generic_property_types():
    text = """
    public class Shapes
    {
        public (int, string) Pair { get; set; }
        public Dictionary<string, object> Bag { get; init; }
        public int[] Numbers { get; set; }
    }
    """
    members = parse_members(text).members
    assert [(m.name, m.type_name) for m in members] == [
        ("Pair", "(int, string)"),
        ("Bag", "Dictionary<string, object>"),
        ("Numbers", "int[]"),
    ]


def test_visibility_combinations():
    text = """
    public class V
    {
        protected internal int A { get; set; }
        private protected int B { get; set; }
        internal int C { get; set; }
        int D { get; set; }
    }
    """
    parsed = read_properties(text)
    assert [m.visibility for m in parsed.members] == [
        Visibility.PROTECTED_INTERNAL,
        Visibility.PRIVATE_PROTECTED,
        Visibility.INTERNAL,
        Visibility.PRIVATE,
    ]
    assert parse_members(text).members == ()


# --- Parameter marker (4 tests) ---

def test_parameter_attributes_flagged(counter):
    flags = {m.name: m.is_bindable_parameter for m in counter.members}
    assert flags == {
        "Title": True,
        "Theme": True,
        "TitleLabel": False,
        "Count": False,
        "Items": False,
    }


def test_parameter_marker_with_arguments_and_qualified_name():
    text = """
    public class P
    {
        [Parameter(CaptureUnmatchedValues = true)]
        public Dictionary<string, object> Attrs { get; set; }

        [Microsoft.AspNetCore.Components.Parameter]
        public string Qualified { get; set; }

        [EditorRequired, SupplyParameterFromQuery]
        public int Page { get; set; }
    }
    """
    assert all(m.is_bindable_parameter for m in parse_members(text).members)


def test_parameter_marker_is_case_sensitive():
    text = "public class P { [parameter] public string Lower { get; set; } }"
    (member,) = parse_members(text).members
    assert member.is_bindable_parameter is False


def test_state_members_skip_parameters(counter):
    assert [m.name for m in counter.state_members()] == ["TitleLabel", "Count", "Items"]


# --- Damaged input (1 test) ---

def test_truncated_class_keeps_members_read_so_far():
    text = "public class Broken { public int A { get; set; } public int B { get;"
    assert [m.name for m in parse_members(text).members] == ["A", "B"]
