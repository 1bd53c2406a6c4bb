import pytest

from mermaid_notation.models.enums import ClassRelationType, NodeShape
from mermaid_notation.models.variants import (
    ClassData,
    ClassDefinition,
    ClassMethod,
    ClassProperty,
    ClassRelationship,
    ERData,
    FlowchartData,
    GitGraphData,
    PieData,
    SequenceData,
    StateData,
)
from mermaid_notation.notation.core import (
    serialize_class,
    serialize_entity_relationship,
    serialize_flowchart,
    serialize_git_history,
    serialize_pie,
    serialize_sequence,
    serialize_state,
)
from mermaid_notation.notation.dispatch import serialize


def test_flowchart_nodes_and_labeled_connections():
    data = FlowchartData.model_validate({
        "nodes": [
            {"id": "A", "label": "Start"},
            {"id": "B", "label": "Process"},
            {"id": "C", "label": "End"},
        ],
        "connections": [
            {"from": "A", "to": "B", "label": "begin"},
            {"from": "B", "to": "C", "label": "finish"},
        ],
    })
    result = serialize_flowchart(data)

    assert result.definition.startswith("flowchart TD")
    assert "A[Start]" in result.definition
    lines = result.definition.split("\n")
    assert lines.index("    A -->|begin| B") < lines.index("    B -->|finish| C")
    assert result.is_valid is True
    assert result.error is None
    assert result.type == "flowchart"


@pytest.mark.parametrize("shape, expected", [
    (NodeShape.RECTANGLE, "n[L]"),
    (NodeShape.ROUNDED, "n(L)"),
    (NodeShape.STADIUM, "n([L])"),
    (NodeShape.SUBROUTINE, "n[[L]]"),
    (NodeShape.CYLINDRICAL, "n[(L)]"),
    (NodeShape.CIRCLE, "n((L))"),
    (NodeShape.RHOMBUS, "n{L}"),
    (NodeShape.HEXAGON, "n{{L}}"),
    (NodeShape.PARALLELOGRAM, "n[/L/]"),
    (NodeShape.TRAPEZOID, "n[\\L\\]"),
    (None, "n[L]"),
])
def test_flowchart_shapes(shape, expected):
    data = FlowchartData(nodes=[{"id": "n", "label": "L", "shape": shape}])
    assert serialize_flowchart(data).definition.split("\n")[1] == f"    {expected}"


def test_flowchart_connection_kinds_class_style_and_direction():
    data = FlowchartData.model_validate({
        "direction": "LR",
        "title": "Pipeline",
        "nodes": [
            {"id": "a", "label": "A", "class": "hot", "style": "fill:#f9f"},
            {"id": "b", "label": "B"},
        ],
        "connections": [
            {"from": "a", "to": "b", "type": "open"},
            {"from": "a", "to": "b", "type": "dotted"},
            {"from": "a", "to": "b", "type": "thick"},
            {"from": "a", "to": "b", "type": "arrow"},
        ],
    })
    assert serialize_flowchart(data).definition == "\n".join([
        "flowchart LR",
        "%% title: Pipeline",
        "    a[A]:::hot",
        "    b[B]",
        "    a --- b",
        "    a -.-> b",
        "    a ==> b",
        "    a --> b",
        "    style a fill:#f9f",
    ])


def test_sequence_participants_arrows_and_activation():
    data = SequenceData.model_validate({
        "title": "Login",
        "participants": [
            {"id": "U", "label": "User", "type": "actor"},
            {"id": "S", "label": "Server"},
        ],
        "interactions": [
            {"from": "U", "to": "S", "message": "login", "activation": True},
            {"from": "S", "to": "U", "message": "token", "type": "dotted"},
            {"from": "U", "to": "S", "message": "ping", "type": "async"},
        ],
        "notes": [{"position": "right of", "participant": "S", "text": "stateless"}],
    })
    assert serialize_sequence(data).definition == "\n".join([
        "sequenceDiagram",
        "    title Login",
        "    actor U as User",
        "    participant S as Server",
        "    U->>+S: login",
        "    S-->>U: token",
        "    U-)S: ping",
        "    Note right of S: stateless",
    ])


def test_sequence_loop_and_alt_blocks():
    data = SequenceData.model_validate({
        "participants": [{"id": "A", "label": "A"}, {"id": "B", "label": "B"}],
        "loops": [{"label": "every minute", "interactions": [{"from": "A", "to": "B", "message": "poll"}]}],
        "alts": [{
            "condition": "ok",
            "interactions": [{"from": "B", "to": "A", "message": "yes"}],
            "else": [{"from": "B", "to": "A", "message": "no", "type": "dotted"}],
        }],
    })
    lines = serialize_sequence(data).definition.split("\n")
    assert lines[3:] == [
        "    loop every minute",
        "        A->>B: poll",
        "    end",
        "    alt ok",
        "        B->>A: yes",
        "    else",
        "        B-->>A: no",
        "    end",
    ]
    assert not any("-)>>" in line for line in lines)


def test_class_members_annotations_and_relations():
    data = ClassData(
        classes=[
            ClassDefinition(
                name="Animal",
                properties=[ClassProperty(name="name", type="String")],
                methods=[ClassMethod(name="speak", return_type="String", abstract=True)],
                abstract=True,
            ),
            ClassDefinition(
                name="Registry",
                properties=[ClassProperty(name="count", type="int", visibility="-", static=True)],
                methods=[ClassMethod(name="lookup", parameters=["id", "kind"], visibility="#")],
                interface=True,
            ),
            ClassDefinition(name="Dog"),
        ],
        relationships=[
            ClassRelationship(source="Animal", target="Dog", type=ClassRelationType.INHERITANCE),
            ClassRelationship(source="Registry", target="Dog", type="association", label="owns", multiplicity="1..*"),
            ClassRelationship(source="Dog", target="Registry", type="link"),
        ],
    )
    assert serialize_class(data).definition == "\n".join([
        "classDiagram",
        "    class Animal {",
        "        +String name",
        "        +speak() String*",
        "    }",
        "    <<abstract>> Animal",
        "    class Registry {",
        "        -int count$",
        "        #lookup(id, kind)",
        "    }",
        "    <<interface>> Registry",
        "    class Dog",
        "    Animal <|-- Dog",
        '    Registry --> "1..*" Dog : owns',
        "    Dog -- Registry",
    ])


@pytest.mark.parametrize("kind, symbol", [
    ("composition", "*--"),
    ("aggregation", "o--"),
    ("realization", "..|>"),
    ("dependency", "..>"),
])
def test_class_relation_symbols(kind, symbol):
    data = ClassData(relationships=[{"from": "A", "to": "B", "type": kind}])
    assert serialize_class(data).definition.split("\n")[-1] == f"    A {symbol} B"


def test_state_diagram_with_composite_choice_and_terminals():
    data = StateData.model_validate({
        "initialState": "Idle",
        "finalState": "Active",
        "states": [
            {"id": "Idle", "label": "Waiting"},
            {"id": "Check", "label": "Check", "type": "choice"},
            {"id": "Active", "label": "Active", "type": "composite", "substates": [
                {"id": "Run", "label": "Running"},
                {"id": "Inner", "label": "Inner", "type": "composite", "substates": [
                    {"id": "Deep", "label": "Deepest"},
                ]},
            ]},
        ],
        "transitions": [
            {"from": "Idle", "to": "Active", "trigger": "start", "guard": "ready", "action": "boot"},
        ],
    })
    assert serialize_state(data).definition == "\n".join([
        "stateDiagram-v2",
        "    [*] --> Idle",
        "    Idle : Waiting",
        "    state Check <<choice>>",
        "    state Active {",
        "        Run : Running",
        "        state Inner {",
        "            Deep : Deepest",
        "        }",
        "    }",
        "    Idle --> Active : start [ready] / boot",
        "    Active --> [*]",
    ])


def test_entity_relationship_keys_and_comment_constraints():
    data = ERData.model_validate({
        "title": "Shop",
        "entities": [{
            "name": "CUSTOMER",
            "attributes": [
                {"name": "id", "type": "int", "constraints": ["PK"]},
                {"name": "email", "type": "string", "constraints": ["UK", "NOT NULL"]},
                {"name": "region_id", "type": "int", "constraints": ["PK", "FK"]},
                {"name": "name", "type": "string"},
            ],
        }],
        "relationships": [{"from": "CUSTOMER", "to": "ORDER", "type": "one-to-many", "label": "places"}],
    })
    assert serialize_entity_relationship(data).definition == "\n".join([
        "erDiagram",
        "%% title: Shop",
        '    CUSTOMER ||--o{ ORDER : "places"',
        "",
        "    CUSTOMER {",
        "        int id PK",
        '        string email UK "NOT NULL"',
        "        int region_id PK, FK",
        "        string name",
        "    }",
    ])


@pytest.mark.parametrize("kind, symbol", [
    ("one-to-one", "||--||"),
    ("many-to-one", "}o--||"),
    ("many-to-many", "}o--o{"),
])
def test_entity_relationship_cardinalities(kind, symbol):
    data = ERData(relationships=[{"from": "A", "to": "B", "type": kind, "label": "x"}])
    assert f"    A {symbol} B : \"x\"" in serialize_entity_relationship(data).definition


def test_git_history_tracks_branches_and_inlines_tags():
    data = GitGraphData.model_validate({
        "commits": [
            {"id": "c1", "message": "init"},
            {"id": "c2", "branch": "develop", "type": "highlight"},
            {"id": "c3", "branch": "main", "tag": "v1"},
        ],
        "branches": [
            {"name": "develop", "from": "main"},
            {"name": "feature", "from": "develop"},
        ],
        "merges": [{"from": "develop", "to": "main", "id": "m1", "tag": "v2"}],
    })
    result = serialize_git_history(data)
    assert result.definition == "\n".join([
        "gitGraph",
        '    commit id: "c1"',
        "    branch develop",
        '    commit id: "c2" type: HIGHLIGHT',
        "    checkout main",
        '    commit id: "c3" tag: "v1"',
        "    checkout develop",
        "    branch feature",
        "    checkout main",
        '    merge develop id: "m1" tag: "v2"',
    ])
    assert not any(line.strip().startswith("tag:") for line in result.definition.split("\n"))


def test_git_history_reverse_commit_on_custom_main():
    data = GitGraphData.model_validate({
        "mainBranch": "trunk",
        "commits": [{"id": "a"}, {"id": "b", "type": "reverse"}],
    })
    assert serialize_git_history(data).definition.split("\n")[1:] == [
        '    commit id: "a"',
        '    commit id: "b" type: REVERSE',
    ]


def test_pie_title_on_first_line_and_values_verbatim():
    data = PieData(title="Budget", slices=[
        {"label": "Development", "value": 45},
        {"label": "Testing", "value": 20.0},
        {"label": "Infra", "value": 35},
    ])
    lines = serialize_pie(data).definition.split("\n")
    assert lines[0] == "pie title Budget"
    assert lines[1:] == [
        '    "Development" : 45',
        '    "Testing" : 20',
        '    "Infra" : 35',
    ]
    assert sum(float(line.split(":")[1]) for line in lines[1:]) == 100


def test_pie_show_data_and_fractional_values():
    data = PieData(title="Mix", show_data=True, slices=[{"label": "a", "value": 12.5}])
    assert serialize_pie(data).definition == 'pie showData\n    title Mix\n    "a" : 12.5'


def test_flowchart_solid_and_arrow_kinds_share_the_plain_arrow():
    result = serialize({
        "kind": "flowchart",
        "nodes": [{"id": "A", "label": "Start"}, {"id": "B", "label": "End"}],
        "connections": [
            {"from": "A", "to": "B", "type": "solid"},
            {"from": "B", "to": "A", "type": "arrow", "label": "again"},
        ],
    })
    lines = result.definition.split("\n")
    assert result.is_valid
    assert "    A --> B" in lines
    assert "    B -->|again| A" in lines
