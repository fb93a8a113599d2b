"""Rendering of the ``user_input.md`` document and the agent prompt.

The document layout is consumed by the generator instructions, so section
order, headings and spacing must stay exactly as written here.
"""

from collections.abc import Sequence
from pathlib import Path

from pomasa.models import ReferenceFile, UserInput

USER_INPUT_FILENAME = "user_input.md"
NONE_PLACEHOLDER = "None"


def _or_none(value: str) -> str:
    return value if value.strip() else NONE_PLACEHOLDER


def render_references(references: Sequence[ReferenceFile]) -> str:
    """One bullet per reference, or ``None`` when the list is empty."""
    if not references:
        return NONE_PLACEHOLDER
    lines = []
    for ref in references:
        if ref.description:
            lines.append(f"- {ref.path} - {ref.description}")
        else:
            lines.append(f"- {ref.path}")
    return "\n".join(lines)


def render_user_input(user_input: UserInput, selected_patterns: Sequence[str]) -> str:
    """Render the creation form as the generator's input document.

    Sections always appear in this order: language settings, project
    identity, data collection, analysis methods, output format, pattern
    selection, other requirements. Empty fields render as ``None``.
    """
    selected = ", ".join(selected_patterns) if selected_patterns else NONE_PLACEHOLDER
    return f"""# User Input

## Language Settings

**Agent Blueprint Language**: {_or_none(user_input.blueprint_language)}

**Report Output Language**: {_or_none(user_input.report_language)}

---

## Research Project Basic Information

**Project Identifier**: {_or_none(user_input.project_id)}

**Research Topic and Core Questions**:

{_or_none(user_input.research_topic)}

**Initial Ideas and Insights**:

{_or_none(user_input.initial_ideas)}

---

## Data Collection

**Data Sources**:

{_or_none(user_input.data_sources)}

**Existing Reference Materials**:

{render_references(user_input.references)}

---

## Analysis Methods

**Analysis Methods**:

{_or_none(user_input.analysis_methods)}

---

## Output Format

**Report Format**:

{_or_none(user_input.report_format)}

**Report Structure**:

{_or_none(user_input.report_structure)}

---

## Pattern Selection

**Quality Assurance Level**: {user_input.quality_level.value}

**Selected Patterns**: {selected}

**Other Patterns to Enable or Disable**:

{_or_none(user_input.pattern_overrides)}

---

## Other Requirements

{_or_none(user_input.other_requirements)}
"""


def build_prompt(generator: str, patterns_dir: Path, document: str, mas_path: Path) -> str:
    """Compose the single prompt handed to the agent."""
    return f"""Please read the generator instructions and create a MAS (Multi-Agent System).

## Generator Instructions

{generator}

## POMASA Framework Location

The POMASA pattern catalog is located at: {patterns_dir}

## User Input

{document}

## Target Directory

Create the MAS in: {mas_path}

Please create all necessary files (agents/, references/, data/ directories and their contents) according to the generator instructions and user input."""
