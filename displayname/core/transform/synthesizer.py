"""Node synthesizer.

Builds the two fragments the transform adds to a file:
an assignment statement after a declaration, and a static class member.
Nodes are plain data; the rewriter decides where they go and how they
are indented.
"""

import json
from dataclasses import dataclass

from ..constants import DISPLAY_NAME_PROPERTY


def string_literal(value: str) -> str:
    """Render a double-quoted JavaScript string literal."""
    return json.dumps(value, ensure_ascii=False)


@dataclass(frozen=True)
class AssignmentStatement:
    """``<target>.<property> = "<value>";``"""

    target: str
    value: str
    property_name: str = DISPLAY_NAME_PROPERTY

    def render(self) -> str:
        return f"{self.target}.{self.property_name} = {string_literal(self.value)};"


@dataclass(frozen=True)
class StaticMember:
    """``static <property> = "<value>";``"""

    value: str
    property_name: str = DISPLAY_NAME_PROPERTY

    def render(self) -> str:
        return f"static {self.property_name} = {string_literal(self.value)};"


def make_assignment(identifier_text: str, name_text: str) -> AssignmentStatement:
    """Statement setting the display name on a declared identifier."""
    return AssignmentStatement(target=identifier_text, value=name_text)


def make_static_member(name_text: str) -> StaticMember:
    """Static class property holding the display name."""
    return StaticMember(value=name_text)
