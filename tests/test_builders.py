from mermaid_notation.builders import create_org_chart, create_project_roadmap, create_risk_matrix


def test_org_chart_layout():
    result = create_org_chart("Org", "Alice", [
        {"name": "Engineering", "head": "Bob", "members": ["Carol", "Dan"]},
        {"name": "Sales", "head": "Eve"},
    ])
    assert result.type == "flowchart"
    assert result.is_valid
    assert result.definition == "\n".join([
        "flowchart TD",
        "%% title: Org",
        "    CEO(Alice)",
        "    dept0[Bob]",
        "    dept0_m0([Carol])",
        "    dept0_m1([Dan])",
        "    dept1[Eve]",
        "    CEO -->|Engineering| dept0",
        "    dept0 --> dept0_m0",
        "    dept0 --> dept0_m1",
        "    CEO -->|Sales| dept1",
    ])


def test_risk_matrix_has_fixed_quadrants():
    result = create_risk_matrix([
        {"name": "Outage", "impact": 0.9, "probability": 0.3},
        {"name": "Churn", "impact": 0.4, "probability": 0.7},
    ])
    lines = result.definition.split("\n")
    assert result.type == "quadrant"
    assert lines[:4] == [
        "quadrantChart",
        "    title Risk Assessment Matrix",
        "    x-axis Low Impact --> High Impact",
        "    y-axis Low Probability --> High Probability",
    ]
    assert "    quadrant-1 Critical Risks" in lines
    assert "    quadrant-2 Monitor Closely" in lines
    assert "    quadrant-3 Low Priority" in lines
    assert "    quadrant-4 Contingency Planning" in lines
    assert '    "Outage": [0.9, 0.3]' in lines
    assert '    "Churn": [0.4, 0.7]' in lines


def test_project_roadmap_periods_combine_quarter_and_name():
    result = create_project_roadmap([
        {"name": "Discovery", "quarter": "Q1", "milestones": ["Interviews", "Personas"]},
        {"name": "Build", "quarter": "Q2", "milestones": ["Beta"]},
    ])
    assert result.type == "timeline"
    assert result.definition == "\n".join([
        "timeline",
        "title Project Roadmap",
        "",
        "Q1 - Discovery : Interviews",
        "        : Personas",
        "",
        "Q2 - Build : Beta",
    ])
